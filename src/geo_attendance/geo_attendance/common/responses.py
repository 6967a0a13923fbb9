from __future__ import annotations

import logging

from flask import jsonify

from ..core.enums import ErrorCode
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def error_response(exc: DomainError, *, debug: bool = False):
    body = exc.to_dict()
    details = dict(body.get("details") or {})
    if not debug:
        details.pop("debug", None)
    if details:
        body["details"] = details
    else:
        body.pop("details", None)
    return jsonify(body), exc.status_code


def unexpected_error_response(exc: Exception, *, message: str, debug: bool = False):
    logger.exception("Unexpected error: %s", message)
    body = {"success": False, "error": ErrorCode.INTERNAL.value, "message": message}
    if debug:
        body["details"] = {"debug": str(exc)}
    return jsonify(body), 500
