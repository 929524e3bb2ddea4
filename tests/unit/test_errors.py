from core.errors import (
    ERROR_DETAILS,
    USER_MESSAGES,
    AlreadySavedError,
    CacheError,
    ErrorCode,
    InternalFailureError,
    NotFoundError,
    ProviderUnavailableError,
    StoreError,
    UnauthorizedError,
    ValidationError,
    WayfarerError,
)
from core.models import ErrorPayload


def test_all_error_codes_have_user_message_and_detail():
    for code in ErrorCode:
        assert code in USER_MESSAGES
        assert code in ERROR_DETAILS


def test_status_codes():
    assert NotFoundError("x").status_code == 404
    assert AlreadySavedError("x").status_code == 400
    assert ValidationError("x").status_code == 400
    assert UnauthorizedError("x").status_code == 401
    assert InternalFailureError("x").status_code == 500
    assert ProviderUnavailableError("x", status_code=503).status_code == 503


def test_cache_and_store_errors_are_internal_failures():
    assert isinstance(CacheError("down"), InternalFailureError)
    assert isinstance(StoreError("down"), InternalFailureError)
    assert CacheError("down").code == ErrorCode.CACHE_UNAVAILABLE
    assert StoreError("down").code == ErrorCode.STORE_UNAVAILABLE


def test_to_result_builds_error_envelope():
    result = NotFoundError("User 7 not found", code=ErrorCode.USER_NOT_FOUND).to_result()

    assert result.code == 404
    assert isinstance(result.data, ErrorPayload)
    assert result.data.error == "USER_NOT_FOUND"
    assert result.data.message == "Not found."
    assert result.data.detail == ERROR_DETAILS[ErrorCode.USER_NOT_FOUND]


def test_provider_error_surfaces_upstream_status():
    result = ProviderUnavailableError("upstream said no", status_code=429).to_result()
    assert result.code == 429
    assert result.data.error == "PROVIDER_UNAVAILABLE"


def test_user_message_never_exposes_internal_message():
    internal = "SELECT * FROM saved_list WHERE user_id = 1"
    err = WayfarerError(internal, code=ErrorCode.STORE_UNAVAILABLE)
    assert internal not in err.user_message
    assert internal not in err.to_result().model_dump_json()
