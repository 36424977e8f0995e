import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stress_scenarios.config import settings
from stress_scenarios.services.scenario_store import StressScenarioData
from stress_scenarios.api.routes import health, stress_tests

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: load the configured stress test file, if any
    if settings.STRESS_CONFIG_PATH:
        StressScenarioData.get().from_file(settings.STRESS_CONFIG_PATH)
    else:
        logger.info("No STRESS_CONFIG_PATH configured, starting without stress data")
    yield


app = FastAPI(title="Stress Scenarios", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(stress_tests.router, prefix="/api")
