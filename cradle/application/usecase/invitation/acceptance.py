"""Acceptance state machine for the accept-invite surface.

Two inputs arrive independently: the token (in the link) and the
authenticated session (possibly after a sign-in detour). Each evaluation of
the surface runs an ``AcceptanceFlow`` from the start; the flow only moves
along the transitions listed in ``TRANSITIONS``.
"""

import asyncio
from collections.abc import Awaitable, Callable, Hashable
from datetime import datetime
from enum import Enum
from typing import TypeVar

import logfire

from cradle.domain.error import (
    DomainError,
    InvalidLinkError,
    InvitationAlreadyAcceptedError,
    InvitationCancelledError,
    InvitationError,
    InvitationExpiredError,
    InvitationNotFoundError,
)
from cradle.domain.model import Invitation
from cradle.domain.service import InvitationService
from cradle.domain.value import InvitationStatus, InvitationToken

T = TypeVar("T")


class AcceptanceState(str, Enum):
    """States of the accept-invite surface."""

    AWAITING_TOKEN = "awaiting_token"
    INVALID_LINK = "invalid_link"
    LOADING = "loading"
    INVITATION_INVALID = "invitation_invalid"
    AWAITING_AUTH = "awaiting_auth"
    ACCEPTING = "accepting"
    ACCEPTED = "accepted"
    ACCEPT_ERROR = "accept_error"


TRANSITIONS: dict[AcceptanceState, frozenset[AcceptanceState]] = {
    AcceptanceState.AWAITING_TOKEN: frozenset(
        {AcceptanceState.INVALID_LINK, AcceptanceState.LOADING}
    ),
    AcceptanceState.LOADING: frozenset(
        {
            AcceptanceState.INVITATION_INVALID,
            AcceptanceState.AWAITING_AUTH,
            AcceptanceState.ACCEPTING,
        }
    ),
    AcceptanceState.AWAITING_AUTH: frozenset({AcceptanceState.ACCEPTING}),
    AcceptanceState.ACCEPTING: frozenset(
        {AcceptanceState.ACCEPTED, AcceptanceState.ACCEPT_ERROR}
    ),
    # Only recoverable failures (email mismatch) may start over
    AcceptanceState.ACCEPT_ERROR: frozenset({AcceptanceState.LOADING}),
    AcceptanceState.INVALID_LINK: frozenset(),
    AcceptanceState.INVITATION_INVALID: frozenset(),
    AcceptanceState.ACCEPTED: frozenset(),
}

INVALID_STATUS_ERRORS: dict[InvitationStatus, type[InvitationError]] = {
    InvitationStatus.ACCEPTED: InvitationAlreadyAcceptedError,
    InvitationStatus.EXPIRED: InvitationExpiredError,
    InvitationStatus.CANCELLED: InvitationCancelledError,
}


class IllegalTransitionError(RuntimeError):
    """Raised when code tries to move the flow along a missing edge."""

    def __init__(self, current: AcceptanceState, target: AcceptanceState):
        self.current = current
        self.target = target
        super().__init__(f"Cannot move from {current.value} to {target.value}")


class AcceptanceFlow:
    """One run of the acceptance state machine."""

    def __init__(self) -> None:
        self.state = AcceptanceState.AWAITING_TOKEN
        self.history: list[AcceptanceState] = [self.state]
        self.error: DomainError | None = None

    @property
    def is_terminal(self) -> bool:
        if self.state == AcceptanceState.ACCEPT_ERROR:
            return not self.recoverable
        return not TRANSITIONS[self.state]

    @property
    def recoverable(self) -> bool:
        return bool(getattr(self.error, "recoverable", False))

    def advance(self, target: AcceptanceState) -> None:
        """Move to ``target``.

        Raises:
            IllegalTransitionError: If ``target`` is not reachable from the
                current state
        """
        if target not in TRANSITIONS[self.state]:
            raise IllegalTransitionError(self.state, target)
        if self.state == AcceptanceState.ACCEPT_ERROR and not self.recoverable:
            raise IllegalTransitionError(self.state, target)
        logfire.debug(
            "Acceptance transition", source=self.state.value, target=target.value
        )
        self.state = target
        self.history.append(target)
        if target == AcceptanceState.LOADING:
            self.error = None

    def fail(self, target: AcceptanceState, error: DomainError) -> None:
        """Move to a failure state, recording why."""
        self.advance(target)
        self.error = error


async def load_invitation(
    flow: AcceptanceFlow,
    token: str | None,
    invitation_service: InvitationService,
    now: datetime,
    has_access: Callable[[Invitation], Awaitable[bool]] | None = None,
) -> Invitation | None:
    """Drive the flow from AWAITING_TOKEN through LOADING.

    An already accepted invitation still loads when ``has_access`` says the
    caller holds a grant on its profile, so repeating a completed
    acceptance reaches the short-circuit instead of failing.

    Returns:
        The invitation when it is effectively pending (flow in LOADING),
        otherwise None with the flow in INVALID_LINK or INVITATION_INVALID
    """
    if token is None or not token.strip():
        flow.fail(AcceptanceState.INVALID_LINK, InvalidLinkError())
        return None

    try:
        invitation_token = InvitationToken(root=token.strip())
    except ValueError:
        flow.fail(AcceptanceState.INVALID_LINK, InvalidLinkError())
        return None

    flow.advance(AcceptanceState.LOADING)
    invitation = await invitation_service.get_by_token(invitation_token)
    if invitation is None:
        flow.fail(AcceptanceState.INVITATION_INVALID, InvitationNotFoundError())
        return None

    status = invitation.effective_status(now)
    if status == InvitationStatus.ACCEPTED and has_access is not None:
        if await has_access(invitation):
            return invitation

    if status != InvitationStatus.PENDING:
        logfire.info(
            "Invitation not acceptable",
            invitation_id=str(invitation.id),
            status=status.value,
        )
        flow.fail(AcceptanceState.INVITATION_INVALID, INVALID_STATUS_ERRORS[status]())
        return None

    return invitation


class AcceptanceRegistry:
    """In-flight acceptance attempts keyed by (token, user id).

    A trigger that arrives while an attempt for the same key is running
    awaits that attempt's result instead of starting a second one. The key
    is released when the attempt finishes, so a later trigger runs afresh.
    """

    def __init__(self) -> None:
        self._inflight: dict[Hashable, asyncio.Future] = {}

    @property
    def inflight(self) -> int:
        return len(self._inflight)

    async def run(self, key: Hashable, attempt: Callable[[], Awaitable[T]]) -> T:
        """Run ``attempt`` unless one is already running for ``key``.

        Args:
            key: Deduplication key
            attempt: Zero-argument coroutine factory

        Returns:
            The result of the (possibly shared) attempt
        """
        existing = self._inflight.get(key)
        if existing is not None:
            logfire.info("Joining in-flight acceptance")
            return await asyncio.shield(existing)

        future = asyncio.ensure_future(attempt())
        self._inflight[key] = future
        future.add_done_callback(lambda done: self._release(key, done))
        return await asyncio.shield(future)

    def _release(self, key: Hashable, future: asyncio.Future) -> None:
        if self._inflight.get(key) is future:
            del self._inflight[key]
