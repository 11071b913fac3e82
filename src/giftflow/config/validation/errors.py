"""Config validation errors – raised while building ``GiftflowSettings``."""
from __future__ import annotations

from giftflow.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No value in the environment and no default on the settings class."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(
            f"{setting_name} must be set",
            detail={"setting": setting_name},
        )
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A value was found but could not be used.

    ``setting_name`` is the environment key when coercion failed and the
    field name when cross-field validation failed.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": repr(value), "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
