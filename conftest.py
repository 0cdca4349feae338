"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

import shellpath.platform


@pytest.fixture(autouse=True)
def reset_default_policy(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Ensure each test detects the default policy from a clean slate."""
    monkeypatch.delenv(shellpath.platform.PLATFORM_OVERRIDE_ENV, raising=False)
    shellpath.platform.reset_default_policy()
    yield
    shellpath.platform.reset_default_policy()
