from __future__ import annotations

import pytest

from core.domain import endpoints
from core.domain.errors import (
    ErrorCode,
    NetworkErrorCode,
    error_from_status,
    map_error,
    to_observability_error_code,
)


@pytest.mark.parametrize(
    ("status", "code"),
    [
        (401, NetworkErrorCode.UNAUTHORIZED),
        (403, NetworkErrorCode.FORBIDDEN),
        (404, NetworkErrorCode.NOT_FOUND),
        (500, NetworkErrorCode.SERVER_ERROR),
        (503, NetworkErrorCode.SERVER_ERROR),
        (418, NetworkErrorCode.SERVER_ERROR),
    ],
)
def test_error_from_status(status, code):
    error = error_from_status(status)
    assert error.code is code
    assert error.status_code == status


def test_error_from_status_generic_message():
    assert error_from_status(418).message == "HTTP 418"


def test_to_observability_error_code():
    assert to_observability_error_code(NetworkErrorCode.TIMEOUT) is ErrorCode.NETWORK_ERROR
    assert to_observability_error_code(NetworkErrorCode.INVALID_JSON) is ErrorCode.INVALID_RESPONSE
    assert to_observability_error_code(NetworkErrorCode.FORBIDDEN) is ErrorCode.FORBIDDEN


def test_map_error():
    assert map_error(ErrorCode.SERVER_ERROR).action == "retry"
    assert map_error("NOT_FOUND").action == "back"
    assert map_error(ErrorCode.UNAUTHORIZED).navigate_to == "Login"
    assert map_error(ErrorCode.TRUST_TIER_REQUIRED).navigate_to == "TrustLadder"
    assert map_error(ErrorCode.MAINTENANCE).tone == "warning"
    assert map_error("SOMETHING_ELSE").recoverable is False


def test_build_url_encodes_params():
    url = endpoints.build_url("https://api.test.com/", endpoints.TASK_PROGRESS, {"taskId": "a b/c"})
    assert url == "https://api.test.com/api/tasks/a%20b%2Fc/progress"


def test_build_url_without_params():
    assert endpoints.build_url("https://api.test.com", endpoints.XP) == "https://api.test.com/api/xp"
