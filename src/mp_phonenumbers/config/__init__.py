"""Config - settings loading and validation."""
from mp_phonenumbers.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    PhoneNumberSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
    SettingsValidator,
)
from mp_phonenumbers.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "PhoneNumberSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "SettingsValidator",
]
