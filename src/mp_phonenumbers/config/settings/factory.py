"""Config settings - SettingsFactory."""
from __future__ import annotations

import dataclasses
import logging
from typing import Any, Sequence, TypeVar

from mp_phonenumbers.config.settings.base import Settings
from mp_phonenumbers.config.settings.loaders import SettingsLoader
from mp_phonenumbers.config.validation.errors import (
    ConfigError,
    MissingRequiredSettingError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Settings)


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


class SettingsFactory:
    """Build one settings instance out of several sources.

    Typical use::

        settings = SettingsFactory.create(
            PhoneNumberSettings,
            loaders=[DotenvSettingsLoader(), EnvSettingsLoader()],
            overrides={"default_region": "NZ"},
        )
    """

    @staticmethod
    def _collect(settings_cls: type[T], loaders: Sequence[SettingsLoader]) -> dict[str, Any]:
        """Field values from every loader that succeeds, later loaders winning.

        A loader that cannot build a complete instance on its own (a required
        variable it lacks, python-dotenv not installed) contributes nothing.
        """
        values: dict[str, Any] = {}
        for loader in loaders:
            try:
                loaded = loader.load(settings_cls)
            except (ConfigError, ImportError) as exc:
                logger.debug("config.loader.skipped loader=%s reason=%s", type(loader).__name__, exc)
                continue
            values.update(dataclasses.asdict(loaded))
        return values

    @staticmethod
    def create(
        settings_cls: type[T],
        loaders: Sequence[SettingsLoader] | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> T:
        """Merge *loaders* in order, apply *overrides* last and construct *settings_cls*.

        Raises:
            MissingRequiredSettingError: a field without default has no value
                after merging; ``setting_name`` is the field name.
            InvalidSettingValueError: the merged values fail validation.
            ConfigError: construction failed for another reason, such as an
                override naming an unknown field.
        """
        values = SettingsFactory._collect(settings_cls, loaders or ())
        values.update(overrides or {})

        for field in dataclasses.fields(settings_cls):  # type: ignore[arg-type]
            if field.name not in values and _is_required(field):
                raise MissingRequiredSettingError(field.name)

        try:
            return settings_cls(**values)
        except ConfigError:
            raise
        except Exception as exc:
            raise ConfigError(f"Failed to construct {settings_cls.__name__}: {exc}") from exc


__all__ = ["SettingsFactory"]
