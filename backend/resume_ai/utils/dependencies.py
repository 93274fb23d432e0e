"""
Request-scoped helpers — build the model gateway from settings.
"""

from __future__ import annotations

from resume_ai.config import settings
from resume_ai.services.llm_service import OpenRouterGateway


async def get_gateway() -> OpenRouterGateway:
    """FastAPI dependency returning a gateway bound to the configured credential.

    Override it in app.dependency_overrides to inject a fake gateway.
    """
    return OpenRouterGateway.from_settings(settings)
