"""Config validation errors."""
from mp_phonenumbers.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be loaded or are unusable."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No source supplied a value for a field without default.

    ``setting_name`` is the environment variable when raised by a loader and
    the field name when raised by :class:`SettingsFactory`.
    """
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"No value for required setting {setting_name}", detail={"setting": setting_name})
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A setting has a value, but not one the engine accepts."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"{setting_name}={value!r} rejected: {reason}", detail={"setting": setting_name})
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
