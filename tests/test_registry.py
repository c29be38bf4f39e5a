import pytest

from errbridge.exceptions import (
    DomainError,
    ErrorKind,
    InternalError,
    NotAllowedError,
    NotFoundError,
    PermissionDeniedError,
    WrongParametersError,
)
from errbridge.registry import (
    DEFAULT_MAPPING,
    ERROR_MAPPINGS,
    ErrorCode,
    ErrorMapping,
    lookup,
)
from tests.factories import make_no_result_found


@pytest.mark.parametrize(
    "error, code, status",
    [
        (NotFoundError(), ErrorCode.NOT_FOUND, 404),
        (NotAllowedError(), ErrorCode.NOT_ALLOWED, 403),
        (WrongParametersError(), ErrorCode.WRONG_PARAMETER, 400),
        (PermissionDeniedError(), ErrorCode.PERMISSION_DENIED, 403),
        (InternalError(), ErrorCode.INTERNAL_ERROR, 500),
    ],
    ids=["not_found", "not_allowed", "wrong_parameters", "permission_denied", "internal"],
)
def test_lookup_business_errors(error: DomainError, code: ErrorCode, status: int) -> None:
    assert lookup(error) == ErrorMapping(code, status)


def test_every_kind_has_exactly_one_mapping() -> None:
    assert set(ERROR_MAPPINGS) == set(ErrorKind)


def test_error_code_values_are_stable() -> None:
    assert [code.value for code in ErrorCode] == [
        "NOT_FOUND",
        "ACTION_NOT_ALLOWED",
        "WRONG_PARAMETER",
        "PERMISSION_DENIED",
        "INTERNAL_ERROR",
    ]


def test_lookup_no_result_found_is_not_found() -> None:
    assert lookup(make_no_result_found()) == ErrorMapping(ErrorCode.NOT_FOUND, 404)


def test_lookup_ignores_message_text() -> None:
    assert lookup(Exception("data not found")) == DEFAULT_MAPPING


def test_lookup_uses_kind_not_message() -> None:
    assert lookup(NotFoundError("user 7 is gone")).code is ErrorCode.NOT_FOUND


def test_lookup_none_returns_default() -> None:
    assert lookup(None) == ErrorMapping(ErrorCode.INTERNAL_ERROR, 500)


def test_registry_is_read_only() -> None:
    with pytest.raises(TypeError):
        ERROR_MAPPINGS[ErrorKind.NOT_FOUND] = DEFAULT_MAPPING  # type: ignore[index]


def test_domain_error_default_messages() -> None:
    assert str(NotFoundError()) == "data not found"
    assert str(NotAllowedError()) == "action not allowed"
    assert str(WrongParametersError()) == "wrong parameters"
    assert str(PermissionDeniedError()) == "permission denied"
    assert str(InternalError()) == "internal system error"
    assert NotFoundError("custom").message == "custom"
