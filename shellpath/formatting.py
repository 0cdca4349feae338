"""Render paths for display relative to a working directory or home."""

from __future__ import annotations

import dataclasses as dc
import os
import typing as t

from .filepath import (
    PARENT_DIR,
    combine,
    common_length,
    components,
    normalize,
    relative_path,
    strip_prefix,
)
from .platform import PathPolicy, resolve_policy

HOME_MARK: t.Final[str] = "~"


def home_path(
    environ: t.Mapping[str, str] | None = None, *, policy: PathPolicy | None = None
) -> str:
    """Return the user's home directory as recorded in *environ*."""
    env = os.environ if environ is None else environ
    policy = resolve_policy(policy)
    if policy.supports_drive_letters:
        # HOMEPATH normally carries its own leading separator.
        home = env.get("HOMEPATH", "").lstrip("".join(policy.separators))
        return f"{env.get('HOMEDRIVE', '')}{policy.separator}{home}"
    return env.get("HOME", "")


def format_relative(
    path: str,
    cwd: str,
    relative_to: str = "",
    *,
    policy: PathPolicy | None = None,
) -> str:
    """Return *path* relative to *relative_to*, both resolved against *cwd*."""
    policy = resolve_policy(policy)
    return relative_path(
        combine(cwd, path, normalize=True, policy=policy),
        combine(cwd, relative_to, policy=policy),
        policy=policy,
    )


@dc.dataclass(frozen=True, slots=True)
class _Steps:
    """How to walk from a base directory to a target."""

    back: int
    skip: int

    def length(self, target: t.Sequence[str]) -> int:
        """Return the number of components in the relative rendering."""
        return self.back + len(target) - self.skip


def _steps(
    base: t.Sequence[str], target: t.Sequence[str], policy: PathPolicy
) -> _Steps:
    shared = common_length(base, target, policy=policy)
    return _Steps(back=len(base) - shared, skip=shared)


def _render_relative(
    target: t.Sequence[str], steps: _Steps, policy: PathPolicy
) -> str:
    if steps.back == 0 and steps.skip >= len(target):
        return "."
    parts = [PARENT_DIR] * steps.back + list(target[steps.skip :])
    return policy.separator.join(parts)


def _render_from_home(parts: t.Sequence[str], policy: PathPolicy) -> str:
    if not parts:
        return HOME_MARK + policy.separator
    return policy.separator.join([HOME_MARK, *parts])


def format_pretty(
    path: str,
    cwd: str,
    home: str,
    relative_to: str = "",
    *,
    policy: PathPolicy | None = None,
) -> str:
    """
    Return the most readable rendering of *path*.

    Parameters
    ----------
    path : str
        The path to render, relative paths being resolved against *cwd*.
    cwd : str
        The current location.
    home : str
        The user's home directory, used when *path* lives under a different
        root than the base directory.
    relative_to : str, optional
        Base directory, resolved against *cwd*. Defaults to *cwd* itself.
    policy : PathPolicy | None, optional
        Path rules to apply. Defaults to the process policy.

    Returns
    -------
    str
        A relative path when it is shorter than the absolute one, a
        ``~``-relative path for files under *home* on another root, and the
        normalized absolute path otherwise.
    """
    policy = resolve_policy(policy)
    absolute = combine(cwd, path, normalize=True, policy=policy)
    path_prefix, target = components(absolute, policy=policy)
    base_prefix, base = components(
        combine(cwd, relative_to, normalize=True, policy=policy), policy=policy
    )

    if not policy.os_eq(path_prefix, base_prefix):
        home_prefix, home_parts = components(home, policy=policy)
        from_home = strip_prefix(target, home_parts, policy=policy)
        if len(from_home) != len(target) and policy.os_eq(home_prefix, path_prefix):
            return _render_from_home(from_home, policy)
        return normalize(path, policy=policy)

    steps = _steps(base, target, policy)
    if steps.length(target) + 1 > len(target):
        return absolute
    return _render_relative(target, steps, policy)


__all__ = ["HOME_MARK", "format_pretty", "format_relative", "home_path"]
