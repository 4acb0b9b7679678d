"""Tests for telemetry redaction."""

from cradle.util.observability import redact_query


def test_token_is_truncated():
    assert (
        redact_query("token=abcdefghijklmnop&status=pending")
        == "token=abcdefgh...&status=pending"
    )


def test_invite_return_param_is_truncated():
    assert redact_query("invite=0123456789abcdef") == "invite=01234567..."


def test_other_params_untouched():
    assert redact_query("status=pending") == "status=pending"


def test_empty_values_kept():
    assert redact_query("token=") == "token="
