"""System routes for Sahayak API."""

import asyncio
from datetime import datetime
from typing import Any, Dict

from fastapi import APIRouter, Depends

from sahayak import __version__
from sahayak.api.dependencies import get_flows_registry
from sahayak.config import Config

router = APIRouter(tags=["System"])


async def test_gemini_connection() -> Dict[str, Any]:
    """Test Gemini API connectivity. Returns dict with status and details."""
    if not Config.is_configured():
        return {"status": "unconfigured", "error": f"{', '.join(Config.get_missing_config())} not set"}

    model = Config.text_model()
    try:
        from google import genai

        client = genai.Client(api_key=Config.gemini_api_key())

        # Model metadata lookup with 2-second timeout
        await asyncio.wait_for(asyncio.to_thread(client.models.get, model=model), timeout=2.0)

        return {"status": "healthy", "model": model}
    except asyncio.TimeoutError:
        return {"status": "timeout", "error": "Request timed out after 2s"}
    except Exception as e:
        return {"status": "unavailable", "error": str(e)[:100]}


@router.get("/health")
async def health_check(flows_registry: Dict[str, Any] = Depends(get_flows_registry)):
    """Health check with Gemini testing. Returns service status, version, flow count, and dependency health."""
    categories = sorted({config["type"] for config in flows_registry.values()}) if flows_registry else []

    gemini_health = await test_gemini_connection()
    overall_status = "healthy" if gemini_health.get("status") == "healthy" else "degraded"

    return {
        "status": overall_status,
        "service": "sahayak-ai",
        "version": __version__,
        "flows": len(flows_registry),
        "categories": categories,
        "models": {
            "text": Config.text_model(),
            "image": Config.image_model(),
            "tts": Config.tts_model(),
        },
        "dependencies": {"gemini": gemini_health},
        "timestamp": datetime.now().isoformat() + "Z",
    }
