"""Tests for the domain error to HTTP status mapping."""

import json

import pytest
from fastapi import Request

from cradle.domain.error import (
    AlreadyGrantedError,
    AlreadyInvitedError,
    CannotRemoveOwnerError,
    DeliveryFailedError,
    ForbiddenError,
    InvalidInputError,
    NotFoundError,
)
from cradle.interface.error import domain_error_handler, status_for


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (ForbiddenError("invite caregivers", "p", "u"), 403),
        (InvalidInputError("Please enter a valid email"), 400),
        (AlreadyGrantedError("a@example.com", "p"), 409),
        (AlreadyInvitedError("a@example.com", "p"), 409),
        (CannotRemoveOwnerError("p"), 400),
        (NotFoundError("Profile", "p"), 404),
        (DeliveryFailedError("a@example.com", "down"), 400),
    ],
)
def test_status_for(error, expected):
    assert status_for(error) == expected


@pytest.mark.asyncio
async def test_domain_error_handler_renders_code_and_detail():
    request = Request(
        {
            "type": "http",
            "method": "GET",
            "path": "/profiles/p/caregivers",
            "headers": [],
            "query_string": b"",
        }
    )

    response = await domain_error_handler(request, NotFoundError("Profile", "p"))

    assert response.status_code == 404
    body = json.loads(response.body)
    assert body["code"] == "not_found"
    assert body["detail"]
