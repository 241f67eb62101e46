"""Error kinds raised by the service and persistence layers."""


class UserApiError(Exception):
    """Base class for expected, client-facing failures."""


class ResourceNotFoundError(UserApiError):
    """A requested resource does not exist."""


class ResourceConflictError(UserApiError):
    """A write violated a storage uniqueness constraint."""
