"""API error payloads and exception handlers."""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from triage_ai.llm.base import ProviderConfigurationError

logger = logging.getLogger(__name__)


class ErrorResponse(BaseModel):
    error: str
    message: str
    details: Optional[Dict[str, Any]] = None


async def provider_configuration_error_handler(
    request: Request, exc: ProviderConfigurationError
) -> JSONResponse:
    logger.error(
        "LLM provider unavailable",
        extra={"metric_type": "llm_provider_unavailable", "path": request.url.path, "error": str(exc)},
    )
    body = ErrorResponse(error="llm_provider_unavailable", message=str(exc))
    return JSONResponse(status_code=503, content=body.model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ProviderConfigurationError, provider_configuration_error_handler)
