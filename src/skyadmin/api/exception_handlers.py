"""
Exception handlers.

Domain errors come back as a failed Result (HTTP 200, code=0) so the admin
console can show ``msg``; a failed audit fill is a server error.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from skyadmin.api.schemas import Result
from skyadmin.exceptions import AuditFillError, SkyAdminError

logger = logging.getLogger(__name__)


async def skyadmin_error_handler(request: Request, exc: SkyAdminError) -> JSONResponse:
    logger.info("Request %s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=200, content=Result.error(exc.message).model_dump())


async def audit_fill_error_handler(request: Request, exc: AuditFillError) -> JSONResponse:
    logger.error("Write aborted on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content=Result.error(exc.message).model_dump())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AuditFillError, audit_fill_error_handler)
    app.add_exception_handler(SkyAdminError, skyadmin_error_handler)
