from contextlib import asynccontextmanager

from fastapi import FastAPI

from readiness.api.readiness import router as readiness_router
from readiness.core.logger import get_logger, setup_logger
from readiness.db.models import Base
from readiness.db.session import get_engine

setup_logger()
logger = get_logger("APP")


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Ensure database tables exist before serving requests."""
    logger.info("Ensuring database tables exist")
    Base.metadata.create_all(bind=get_engine())
    logger.info("Database tables verified")
    yield


app = FastAPI(title="Readiness API", lifespan=lifespan)
app.include_router(readiness_router)


@app.get("/health")
def health():
    return {"status": "ok"}
