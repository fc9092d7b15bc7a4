"""Shared fixtures: a registry and facade built from the bundled test metadata."""

from __future__ import annotations

pytest_plugins = ["mp_phonenumbers.testing.fixtures"]
