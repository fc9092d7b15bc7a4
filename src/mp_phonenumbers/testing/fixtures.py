"""Testing fixtures - pytest fixtures for the engine on test metadata.

Register in your ``conftest.py``::

    pytest_plugins = ["mp_phonenumbers.testing.fixtures"]
"""

from __future__ import annotations

try:
    import pytest

    @pytest.fixture(scope="session")
    def phone_registry():
        """Pytest fixture: a registry loaded from the test metadata."""
        from mp_phonenumbers.testing.metadata import build_test_registry

        return build_test_registry()

    @pytest.fixture(scope="session")
    def phone_util(phone_registry):
        """Pytest fixture: a :class:`PhoneNumberUtil` over :func:`phone_registry`."""
        from mp_phonenumbers.util import PhoneNumberUtil

        return PhoneNumberUtil(phone_registry)

except ImportError:
    pass

__all__ = ["phone_registry", "phone_util"]
