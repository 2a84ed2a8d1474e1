"""Hello webhook - minimal smoke-test endpoint."""
import json
import logging
from typing import Any, Dict
from urllib.parse import parse_qs
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from translate_gateway.models.translation import WebhookResponse
from translate_gateway.services.gateway.errors import MALFORMED_BODY_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter(tags=["webhook"])

WEBHOOK_USAGE_MESSAGE = 'Send { "text": "hello" }'


async def _read_body(request: Request) -> Dict[str, Any]:
    """Parse a JSON or form-urlencoded body; other content types yield an empty body.

    Raises:
        ValueError: If a JSON body cannot be parsed
    """
    raw = await request.body()
    if not raw:
        return {}

    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/x-www-form-urlencoded"):
        parsed = parse_qs(raw.decode("utf-8", errors="replace"))
        return {key: values[0] for key, values in parsed.items() if values}
    if not content_type or "json" in content_type:
        data = json.loads(raw)
        return data if isinstance(data, dict) else {}
    return {}


@router.post("/webhook", response_model=WebhookResponse)
async def hello_webhook(request: Request):
    """Reply ``{"text": "world"}`` to ``{"text": "hello"}`` and 400 to anything else."""
    try:
        body = await _read_body(request)
    except ValueError:
        return JSONResponse(status_code=400, content={"error": MALFORMED_BODY_MESSAGE})

    text = body.get("text")
    text = text.strip().lower() if isinstance(text, str) else ""
    if text == "hello":
        return WebhookResponse(text="world")

    logger.debug(f"Webhook received unexpected text: {text[:50]!r}")
    return JSONResponse(status_code=400, content={"error": WEBHOOK_USAGE_MESSAGE})
