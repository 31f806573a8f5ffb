from __future__ import annotations

from fastapi import FastAPI

from api.actions import config, health, mutant, stats
from core import configure_logging, get_settings
from dnascan import __version__

configure_logging(get_settings().log_level)

app = FastAPI(title="DNA Mutant Detection API", version=__version__)

app.include_router(mutant.router)
app.include_router(stats.router)
app.include_router(health.router)
app.include_router(config.router)
