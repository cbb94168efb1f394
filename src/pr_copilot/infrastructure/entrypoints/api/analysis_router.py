import structlog
from fastapi import APIRouter, Depends, Header, Request

from pr_copilot.application.diff_analysis_service import DiffAnalysisService
from pr_copilot.core.domain.analysis_result import AnalyzeDiffResponse
from pr_copilot.infrastructure.entrypoints.api.dtos.analyze_diff_request_dto import (
    AnalyzeDiffRequestDTO,
)

logger = structlog.get_logger()
router = APIRouter()


def get_analysis_service(request: Request) -> DiffAnalysisService:
    return request.app.state.analysis_service


@router.post(
    "/analyze-diff",
    response_model=AnalyzeDiffResponse,
    response_model_exclude_none=True,
)
async def analyze_diff(
    payload: AnalyzeDiffRequestDTO,
    x_request_id: str | None = Header(None),
    service: DiffAnalysisService = Depends(get_analysis_service),
) -> AnalyzeDiffResponse:
    request_id = payload.request_id or x_request_id
    logger.info(
        "Received diff analysis request",
        diff_chars=len(payload.diff),
        language=payload.language,
        style=payload.style,
        request_id=request_id,
    )
    return await service.analyze(
        diff=payload.diff,
        language=payload.language,
        style=payload.style,
        max_summary_length=payload.max_summary_length,
        request_id=request_id,
    )
