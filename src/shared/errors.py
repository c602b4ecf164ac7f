"""Exceptions shared by every bounded context.

Validation and not-found conditions use Protean's own ``ValidationError``
and ``ObjectNotFoundError``. The only addition is an authorization failure,
which Protean has no exception for.
"""


class AccessDenied(Exception):
    """The acting user is not allowed to perform this operation."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
