"""Domain errors raised by the crud and service layers.

Each error carries the HTTP status the API renders it with; route handlers
never catch them, ``mynetwrk.main`` installs a single handler instead.
"""


class MyNetwrkError(Exception):
    """Base exception for all MyNetwrk errors."""

    status_code = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFound(MyNetwrkError):
    """Target of a read/update/delete is absent or owned by someone else."""

    status_code = 404


class ReferenceNotFound(MyNetwrkError):
    """A referenced contact, group, interaction type or timezone cannot be used."""

    status_code = 404

    def __init__(self, kind: str, ref_id: object):
        self.kind = kind
        self.ref_id = ref_id
        super().__init__(f"{kind} with id {ref_id} does not exist")


class ValidationError(MyNetwrkError):
    """Input passed schema validation but breaks a business rule."""

    status_code = 422


class Conflict(MyNetwrkError):
    status_code = 409


class Unauthenticated(MyNetwrkError):
    status_code = 401

    def __init__(self, message: str = "Not authenticated"):
        super().__init__(message)


class SubscriptionRequired(MyNetwrkError):
    status_code = 403

    def __init__(self, message: str = "This is a paid feature. Please switch to a paid plan to use it."):
        super().__init__(message)


class ExternalServiceError(MyNetwrkError):
    """The AI provider failed. Logged and suppressed, never shown to callers."""

    status_code = 502
