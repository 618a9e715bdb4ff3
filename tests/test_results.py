import pytest
from utmify_tracker.utmify.results import (
    InvalidInput,
    ProviderRejected,
    SendSuccess,
    TransportFailure,
)


@pytest.mark.parametrize(
    "result, expected",
    [
        (SendSuccess(response="x"), True),
        (ProviderRejected(status_code=400, error="bad", response="bad"), False),
        (TransportFailure(error="ConnectError: refused"), False),
        (InvalidInput(error="status: invalid"), False),
    ],
)
def test_success_flag_matches_variant(result, expected):
    assert result.success is expected
    assert result.to_dict()["success"] is expected


@pytest.mark.parametrize(
    "variant, kwargs",
    [
        (SendSuccess, {"response": "x"}),
        (ProviderRejected, {"status_code": 500, "error": "e", "response": "e"}),
        (TransportFailure, {"error": "e"}),
        (InvalidInput, {"error": "e"}),
    ],
)
def test_success_flag_cannot_be_overridden(variant, kwargs):
    """The flag belongs to the variant, not to the caller."""
    with pytest.raises(TypeError):
        variant(success=not variant(**kwargs).success, **kwargs)


def test_transport_failure_has_no_response_key():
    assert TransportFailure(error="e").to_dict() == {"success": False, "error": "e"}
