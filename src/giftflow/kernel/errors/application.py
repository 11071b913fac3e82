"""Application errors – a use case or the publishing pipeline gave up."""

from __future__ import annotations

from giftflow.kernel.errors.base import GiftflowError


class ApplicationError(GiftflowError):
    default_code = "application_error"


__all__ = ["ApplicationError"]
