"""
LLM Service — chat-completion gateway to OpenRouter via LiteLLM.

Responsibilities:
  • Hold the provider credential, endpoint and timeout given at construction
  • Refuse to call out when no credential is configured
  • Send exactly one user message per call, with no retries
  • Validate the completion envelope and return the assistant's text
"""

from __future__ import annotations

import logging

import litellm
from litellm import acompletion
from openai import OpenAIError
from pydantic import ValidationError as EnvelopeValidationError

from resume_ai.config import MODELS, Settings
from resume_ai.errors import (
    MissingCredentialError,
    UpstreamDecodeError,
    UpstreamTransportError,
)
from resume_ai.models.resume_models import ChatMessage, GatewayRequest, GatewayResponse

logger = logging.getLogger(__name__)

# Silence verbose LiteLLM logs in dev
litellm.suppress_debug_info = True
litellm.set_verbose = False


PROVIDER = "openrouter"


# ── Helpers ──────────────────────────────────────────────────────────────────


def _resolve_model_id(provider: str, model_key: str) -> str:
    """Look up the LiteLLM model_id from our registry."""
    provider_models = MODELS.get(provider)
    if not provider_models:
        raise ValueError(f"Unknown provider: {provider}")
    model_entry = provider_models.get(model_key)
    if not model_entry:
        raise ValueError(f"Unknown model: {model_key} for provider {provider}")
    return model_entry["model_id"]


# ── Gateway ──────────────────────────────────────────────────────────────────


class OpenRouterGateway:
    """Sends one prompt to the upstream chat-completion endpoint per call."""

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str = "https://openrouter.ai/api/v1",
        timeout: float | None = 60.0,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings) -> "OpenRouterGateway":
        return cls(
            api_key=settings.openrouter_api_key,
            base_url=settings.openrouter_base_url,
            timeout=settings.llm_timeout_seconds,
        )

    async def complete(self, message: ChatMessage, *, model_key: str = "gpt-3.5-turbo") -> str:
        """
        Send a single chat message and return the assistant's reply text.

        Raises:
            MissingCredentialError: no API key configured (checked before any I/O).
            UpstreamTransportError: connection refused, TLS failure or timeout.
            UpstreamDecodeError:    error status, unreadable envelope or no choices.
        """
        if not self.api_key or not self.api_key.strip():
            raise MissingCredentialError("OpenRouter API key is not configured (OPENROUTER_API_KEY)")

        model_id = _resolve_model_id(PROVIDER, model_key)
        request = GatewayRequest(model=model_id, messages=[message])

        logger.info(f"LLM call: provider={PROVIDER} model={model_id} timeout={self.timeout}")

        try:
            response = await acompletion(
                **request.model_dump(),
                api_key=self.api_key,
                api_base=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        except (litellm.Timeout, litellm.APIConnectionError) as e:
            logger.error(f"LLM transport error ({PROVIDER}/{model_key}): {e}")
            raise UpstreamTransportError(f"Could not reach the model provider: {e}") from e
        except OpenAIError as e:
            logger.error(f"LLM provider error ({PROVIDER}/{model_key}): {e}")
            raise UpstreamDecodeError(f"Model provider returned an unusable response: {e}") from e

        content = _extract_content(response)
        logger.info(f"LLM response: {len(content)} chars, usage={getattr(response, 'usage', None)}")
        return content


def _extract_content(response: object) -> str:
    """Validate the completion envelope and pull out choices[0].message.content."""
    try:
        envelope = GatewayResponse.model_validate(response, from_attributes=True)
    except EnvelopeValidationError as e:
        logger.error(f"LLM envelope did not match the expected shape: {e}")
        raise UpstreamDecodeError("Model provider response could not be decoded") from e

    if not envelope.choices:
        logger.error("LLM envelope has no choices")
        raise UpstreamDecodeError("Model provider response contained no choices")

    return envelope.choices[0].message.content
