"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from triage_ai import __version__
from triage_ai.api.errors import register_exception_handlers
from triage_ai.api.routes import classify, health
from triage_ai.config.settings import settings
from triage_ai.utils.log_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    logger.info(
        "triage-ai starting",
        extra={
            "provider": settings.llm_provider,
            "model": settings.openai_model,
            "rate_limit_token_limit": settings.rate_limit_token_limit,
        },
    )
    yield


app = FastAPI(title="triage-ai", version=__version__, lifespan=lifespan)
register_exception_handlers(app)
app.include_router(health.router, tags=["health"])
app.include_router(classify.router, tags=["classification"])


if __name__ == "__main__":
    uvicorn.run("triage_ai.main:app", host=settings.api_host, port=settings.api_port)
