"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display a stable error kind
plus one or more human-readable messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""

    kind = "domain_error"

    def __init__(self, *messages: str) -> None:
        self.messages = list(messages) or [self.kind]
        super().__init__("; ".join(self.messages))

    def payload(self) -> dict:
        return {"kind": self.kind, "messages": list(self.messages)}


class ValidationError(DomainException):
    """A business rule or invariant was violated."""

    kind = "validation_error"


class NotFoundError(DomainException):
    """A requested entity does not exist or is not visible to the caller."""

    kind = "not_found"


class ConflictError(DomainException):
    """Concurrent writes collided on the same document.

    Reserved: nothing raises it yet.
    """

    kind = "conflict"


class InternalError(DomainException):
    """The storage backend failed. Details go to the log, not the caller."""

    kind = "internal_error"

    def __init__(self, *messages: str) -> None:
        super().__init__(*(messages or ("Internal Server Error",)))
