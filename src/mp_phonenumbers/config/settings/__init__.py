"""Config settings - 12-factor env-based configuration."""
from mp_phonenumbers.config.settings.base import Settings
from mp_phonenumbers.config.settings.factory import SettingsFactory
from mp_phonenumbers.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from mp_phonenumbers.config.settings.phonenumbers import PhoneNumberSettings
from mp_phonenumbers.config.settings.validator import SettingsValidator

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "PhoneNumberSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "SettingsValidator",
]
