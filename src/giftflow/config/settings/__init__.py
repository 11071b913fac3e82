"""Config settings – 12-factor env-based configuration."""
from giftflow.config.settings.base import Settings
from giftflow.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader

__all__ = ["DotenvSettingsLoader", "EnvSettingsLoader", "Settings", "SettingsLoader"]
