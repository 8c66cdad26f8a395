import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from gdrivecheck import __version__
from gdrivecheck.api.routes import router
from gdrivecheck.auth import AuthInfo
from gdrivecheck.checker import DownloadabilityChecker
from gdrivecheck.config import Settings, get_settings
from gdrivecheck.errors import GDriveCheckError, InvalidRequestError

logger = logging.getLogger(__name__)


def build_checker(settings: Settings) -> DownloadabilityChecker:
    return DownloadabilityChecker(
        AuthInfo.from_api_key(settings.google_drive_api_key),
        supports_all_drives=settings.drive_supports_all_drives,
        timeout=settings.drive_timeout_seconds,
    )


def create_app(
    settings: Optional[Settings] = None,
    *,
    checker: Optional[DownloadabilityChecker] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    When no checker is given one is built from settings (loaded from the
    environment if not passed), so a missing API key fails here, at startup.
    """
    if checker is None:
        checker = build_checker(settings or get_settings())

    application = FastAPI(
        title="gdrivecheck",
        description="Check whether a Google Drive link holds a pdf, image or video",
        version=__version__,
    )
    application.state.checker = checker
    application.include_router(router)

    application.add_exception_handler(RequestValidationError, _handle_invalid_body)
    application.add_exception_handler(InvalidRequestError, _handle_invalid_request)
    application.add_exception_handler(GDriveCheckError, _handle_provider_error)

    return application


async def _handle_invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s: malformed body (%d errors)", request.url.path, len(exc.errors()))
    return _error(400, InvalidRequestError.INVALID_PARAMETERS)


async def _handle_invalid_request(request: Request, exc: InvalidRequestError) -> JSONResponse:
    logger.info("Rejected %s: %s", request.url.path, exc)
    return _error(400, str(exc))


async def _handle_provider_error(request: Request, exc: GDriveCheckError) -> JSONResponse:
    logger.warning(
        "Drive lookup failed on %s: %s(%s): %s details=%s",
        request.url.path,
        type(exc).__name__,
        getattr(exc, "kind", "-"),
        exc,
        exc.details,
    )
    return _error(500, str(exc))


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})
