import logging

from fastapi import APIRouter, Depends, Request

from gdrivecheck.api.schemas import CheckRequest, CheckResponse, ErrorResponse, HealthResponse
from gdrivecheck.checker import DownloadabilityChecker

logger = logging.getLogger(__name__)

router = APIRouter()


def get_checker(request: Request) -> DownloadabilityChecker:
    return request.app.state.checker


@router.post(
    "/check-downloadable",
    response_model=CheckResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def check_downloadable(
    body: CheckRequest,
    checker: DownloadabilityChecker = Depends(get_checker),
) -> CheckResponse:
    """Answer whether the linked file, or a file directly in the linked folder, matches the type"""
    # Sync handler: Drive client calls block, FastAPI runs this in its threadpool.
    result = checker.check(body.link, body.type)
    logger.info(
        "Checked %s %s for %s: %s",
        result.mode,
        result.identifier,
        result.category,
        result.answer,
    )
    return CheckResponse(result=result.answer)


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Lightweight health check (no Drive call)"""
    return HealthResponse()
