"""Kernel error hierarchy and its public re-export surface.

Hierarchy::

    BaseError
    +-- DomainError          (domain.py)
    |   `-- NumberParseError (parse.py)
    `-- ApplicationError     (application.py)
        `-- MetadataLoadError
"""

from mp_phonenumbers.kernel.errors.application import ApplicationError, MetadataLoadError
from mp_phonenumbers.kernel.errors.base import BaseError
from mp_phonenumbers.kernel.errors.domain import DomainError
from mp_phonenumbers.kernel.errors.parse import ErrorType, NumberParseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "ErrorType",
    "MetadataLoadError",
    "NumberParseError",
]
