"""Root of the giftflow error hierarchy."""

from __future__ import annotations

from typing import Any


class GiftflowError(Exception):
    """Base class for every error giftflow raises on purpose.

    ``code`` is a stable slug that log pipelines can group on; ``detail``
    holds the structured context (ids, quantities) that goes into the log
    line next to it.  ``str(err)`` is the plain message.
    """

    default_code: str = "giftflow_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"

    def log_fields(self) -> dict[str, Any]:
        """Flat key/value pairs to splat into a structlog call."""
        return {"error_code": self.code, **self.detail}

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": dict(self.detail),
        }
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


__all__ = ["GiftflowError"]
