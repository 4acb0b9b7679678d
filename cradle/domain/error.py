"""Domain layer errors.

Every error carries a stable ``code`` that the API reports alongside the
message, so clients can branch on the kind of failure without parsing text.
"""


class DomainError(Exception):
    """Base domain error."""

    code = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error."""

    code = "validation_error"


class InvalidInputError(ValidationError):
    """Raised when user input such as an email address is malformed."""

    code = "invalid_input"


class ForbiddenError(DomainError):
    """Raised when the actor lacks the role an operation requires."""

    code = "forbidden"

    def __init__(self, action: str, profile_id: str, user_id: str):
        self.action = action
        self.profile_id = profile_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} on profile {profile_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AlreadyGrantedError(DomainError):
    """Raised when the invitee already has access to the profile."""

    code = "already_granted"

    def __init__(self, email: str, profile_id: str, message: str | None = None):
        self.email = email
        self.profile_id = profile_id
        super().__init__(message or f"{email} is already a caregiver for this profile")


class AlreadyInvitedError(AlreadyGrantedError):
    """Raised when a pending invitation for the address was created concurrently."""

    code = "already_invited"

    def __init__(self, email: str, profile_id: str):
        super().__init__(
            email, profile_id, f"{email} already has a pending invitation for this profile"
        )


class CannotRemoveOwnerError(DomainError):
    """Raised when revoking the owner's own grant."""

    code = "cannot_remove_owner"

    def __init__(self, profile_id: str):
        self.profile_id = profile_id
        super().__init__("The owner's access to a profile cannot be removed")


class InvitationError(DomainError):
    """Base for failures that end the invitation acceptance flow."""

    code = "invitation_error"
    recoverable = False


class InvalidLinkError(InvitationError):
    """Raised when the accept link carries no usable token."""

    code = "invalid_link"

    def __init__(self):
        super().__init__("Invalid invitation link")


class InvitationNotFoundError(InvitationError):
    """Raised when no invitation matches the token."""

    code = "not_found"

    def __init__(self):
        super().__init__("Invitation not found")


class InvitationAlreadyAcceptedError(InvitationError):
    """Raised when the invitation has already been accepted."""

    code = "already_accepted"

    def __init__(self):
        super().__init__("This invitation has already been accepted")


class InvitationExpiredError(InvitationError):
    """Raised when the invitation's expiry has passed."""

    code = "expired"

    def __init__(self):
        super().__init__("This invitation has expired")


class InvitationCancelledError(InvitationError):
    """Raised when the owner cancelled the invitation."""

    code = "cancelled"

    def __init__(self):
        super().__init__("This invitation has been cancelled")


class EmailMismatchError(InvitationError):
    """Raised when the signed-in account is not the invited address.

    Recoverable: the user can sign out and sign in with the right account.
    """

    code = "email_mismatch"
    recoverable = True

    def __init__(self, expected_email: str):
        self.expected_email = expected_email
        super().__init__(
            f"This invitation is for {expected_email}. Please sign in with that email."
        )


class DeliveryFailedError(DomainError):
    """Raised by the mailer when an invitation email could not be sent.

    Never blocks invitation creation; callers report it as a warning.
    """

    code = "delivery_failed"

    def __init__(self, email: str, reason: str):
        self.email = email
        self.reason = reason
        super().__init__(f"Failed to send invitation email to {email}: {reason}")
