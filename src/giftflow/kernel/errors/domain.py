"""Domain errors – rules the gift domain refuses to break."""

from __future__ import annotations

from typing import Any, Mapping

from giftflow.kernel.errors.base import GiftflowError


class DomainError(GiftflowError):
    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A state change would leave an aggregate in an invalid state.

    Raised before anything is mutated, so the aggregate is unchanged.
    """

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """Input rejected before it reached an aggregate.

    ``violations`` maps each offending field to a short reason; a single
    bad value may leave it empty.
    """

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        violations: Mapping[str, str] | None = None,
        **kwargs: Any,
    ) -> None:
        self.violations: dict[str, str] = dict(violations or {})
        detail = dict(kwargs.pop("detail", None) or {})
        if self.violations:
            detail.setdefault("violations", self.violations)
        super().__init__(message, detail=detail, **kwargs)

    @property
    def fields(self) -> frozenset[str]:
        return frozenset(self.violations)


class NotFoundError(DomainError):
    """A repository lookup by id came back empty."""

    default_code = "not_found"

    def __init__(self, resource: str, identifier: Any = None, **kwargs: Any) -> None:
        if identifier is None:
            message = f"{resource} does not exist"
        else:
            message = f"{resource} {identifier!s} does not exist"
        detail = dict(kwargs.pop("detail", None) or {})
        detail.setdefault("resource", resource)
        if identifier is not None:
            detail.setdefault("identifier", str(identifier))
        super().__init__(message, detail=detail, **kwargs)
        self.resource = resource
        self.identifier = identifier


class ConflictError(DomainError):
    """The aggregate is in a state that forbids the requested transition."""

    default_code = "conflict"

    def __init__(self, message: str, *, current_state: str | None = None, **kwargs: Any) -> None:
        detail = dict(kwargs.pop("detail", None) or {})
        if current_state is not None:
            detail.setdefault("current_state", current_state)
        super().__init__(message, detail=detail, **kwargs)
        self.current_state = current_state


__all__ = [
    "ConflictError",
    "DomainError",
    "InvariantViolationError",
    "NotFoundError",
    "ValidationError",
]
