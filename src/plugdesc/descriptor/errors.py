"""Errors raised while reading a plugin description."""

from typing import Optional


class InvalidDescriptionError(Exception):
    """Raised when a plugin description cannot be parsed or validated.

    Attributes:
        reason: Human readable explanation, e.g. "name is not defined".
        field: The offending top-level key, or None for document-level failures.
    """

    def __init__(self, reason: str, field: Optional[str] = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.field = field


class MissingFieldError(InvalidDescriptionError):
    """A required field is absent, null, or empty."""

    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is not defined", field=field)


class WrongTypeError(InvalidDescriptionError):
    """A field is present but its value has the wrong shape."""

    def __init__(self, field: str) -> None:
        # Collection keys take a plural verb
        verb = "are" if field in ("authors", "commands", "permissions") else "is"
        super().__init__(f"{field} {verb} of wrong type", field=field)
