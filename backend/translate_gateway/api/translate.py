"""Translation endpoint."""
import logging
from typing import Any, Dict, Optional
from fastapi import APIRouter, Body, Depends, Request
from translate_gateway.models.translation import ErrorResponse, TranslationResponse
from translate_gateway.services.gateway.orchestrator import TranslationOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter(tags=["translation"])


def get_orchestrator(request: Request) -> TranslationOrchestrator:
    """Return the orchestrator built at application start-up."""
    return request.app.state.orchestrator


@router.post(
    "/",
    response_model=TranslationResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Missing prompt, unsupported provider or malformed body"},
        500: {"model": ErrorResponse, "description": "Provider credential not configured"},
        502: {"model": ErrorResponse, "description": "Upstream call failed or returned no text"},
    },
)
async def translate(
    body: Optional[Dict[str, Any]] = Body(None),
    orchestrator: TranslationOrchestrator = Depends(get_orchestrator),
):
    """
    Translate a prompt with the selected provider.

    Body: ``{"provider"?: str, "prompt": str, "metadata"?: object}``.
    Errors are rendered as ``{"error": str}`` by the application's exception handlers.
    """
    return await orchestrator.translate(body)
