from fastapi import APIRouter, Depends, HTTPException, Response
import logging

from resume_ai.errors import ExtractionError
from resume_ai.models.resume_models import ExtractionRequest, ResumeDocument
from resume_ai.services.llm_service import OpenRouterGateway
from resume_ai.services.resume_service import analyze_description, render_document
from resume_ai.utils.dependencies import get_gateway

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/analyze",
    responses={200: {"model": ResumeDocument, "description": "Normalized resume document"}},
)
async def analyze(
    req: ExtractionRequest,
    gateway: OpenRouterGateway = Depends(get_gateway),
):
    """Extract a structured resume from a free-form personal description."""
    try:
        tree = await analyze_description(req.description, gateway=gateway)
    except ExtractionError as e:
        logger.warning(f"Analyze failed: {type(e).__name__}: {e}")
        raise HTTPException(status_code=e.status_code, detail=e.to_detail())

    return Response(content=render_document(tree), media_type="application/json")
