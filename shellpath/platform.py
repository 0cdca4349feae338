"""Platform policies shared across shellpath modules.

Centralising the separator and case rules keeps the Windows/POSIX matrix in
one place and lets both policies be exercised from a single interpreter.
"""

from __future__ import annotations

import dataclasses as dc
import functools
import logging
import os
import sys
import typing as t

logger = logging.getLogger(__name__)

# Tests and embedding hosts set this override to emulate alternative platforms
# (for example Windows) without needing to spawn a different OS.
PLATFORM_OVERRIDE_ENV: t.Final[str] = "SHELLPATH_PLATFORM_OVERRIDE"

# Prefixes (as reported by ``sys.platform``) that select Windows path rules.
_WINDOWS_PLATFORMS: t.Final[tuple[str, ...]] = ("win",)


@dc.dataclass(frozen=True, slots=True)
class PathPolicy:
    """
    Separator and comparison rules for one family of path grammars.

    Attributes
    ----------
    name : str
        Short label used in logs and reprs.
    separators : tuple[str, ...]
        Characters treated as path separators. The first entry is the
        canonical separator used when rendering paths.
    case_sensitive : bool
        Whether component comparisons respect case.
    supports_drive_letters : bool
        Whether ``C:``-style drives are native path syntax. Virtual drives
        such as ``env:`` are recognized by the prefix resolver either way.
    supports_unc : bool
        Whether ``\\\\server\\share\\`` prefixes are recognized.
    """

    name: str
    separators: tuple[str, ...]
    case_sensitive: bool
    supports_drive_letters: bool
    supports_unc: bool

    def __post_init__(self) -> None:
        """Validate the separator set."""
        if not self.separators:
            msg = "a path policy needs at least one separator"
            raise ValueError(msg)
        if any(len(sep) != 1 for sep in self.separators):
            msg = "path separators must be single characters"
            raise ValueError(msg)

    @property
    def separator(self) -> str:
        """Return the canonical separator."""
        return self.separators[0]

    def is_separator(self, char: str) -> bool:
        """Return ``True`` when *char* separates path components."""
        return char in self.separators

    def os_eq(self, a: str, b: str) -> bool:
        """Compare *a* and *b* the way the host filesystem would."""
        if self.case_sensitive:
            return a == b
        return a.casefold() == b.casefold()


WINDOWS_POLICY: t.Final[PathPolicy] = PathPolicy(
    name="windows",
    separators=("\\", "/"),
    case_sensitive=False,
    supports_drive_letters=True,
    supports_unc=True,
)

POSIX_POLICY: t.Final[PathPolicy] = PathPolicy(
    name="posix",
    separators=("/",),
    case_sensitive=True,
    supports_drive_letters=False,
    supports_unc=False,
)


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for prefix checks."""
    return platform.strip().lower()


def _current_platform() -> str:
    """Return the effective platform name, honouring test overrides."""
    if override := os.getenv(PLATFORM_OVERRIDE_ENV):
        return _normalise(override)

    return _normalise(sys.platform)


def policy_for(platform: str) -> PathPolicy:
    """Return the policy matching *platform* (a ``sys.platform``-style name)."""
    platform_name = _normalise(platform)
    if platform_name == "nt" or platform_name.startswith(_WINDOWS_PLATFORMS):
        return WINDOWS_POLICY
    return POSIX_POLICY


@functools.cache
def default_policy() -> PathPolicy:
    """Return the process-wide policy, detected on first use."""
    platform_name = _current_platform()
    policy = policy_for(platform_name)
    logger.debug("Selected %s path policy for platform %r", policy.name, platform_name)
    return policy


def reset_default_policy() -> None:
    """Forget the detected policy so the next call re-detects it."""
    default_policy.cache_clear()


def resolve_policy(policy: PathPolicy | None) -> PathPolicy:
    """Return *policy*, falling back to :func:`default_policy`."""
    return default_policy() if policy is None else policy


__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "POSIX_POLICY",
    "WINDOWS_POLICY",
    "PathPolicy",
    "default_policy",
    "policy_for",
    "reset_default_policy",
    "resolve_policy",
]
