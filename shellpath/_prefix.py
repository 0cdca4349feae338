"""Split path strings into a root-indicating prefix and a relative rest.

A prefix is one of: nothing (relative path), a run of separators (root), a
drive (``C:`` or a virtual drive such as ``env:``) optionally followed by one
separator, or a UNC share (``\\\\server\\share\\``).
"""

from __future__ import annotations

import typing as t

from .platform import PathPolicy, resolve_policy

# Characters that may not appear in a drive name. ``.`` and ``~`` keep
# relative components such as ``..:`` or ``~:`` from reading as drives.
_DRIVE_DISALLOWED: t.Final[frozenset[str]] = frozenset(";~/\\.:")

# Virtual drives accept either slash regardless of policy (``variable:\x``).
_ANY_SEPARATOR: t.Final[tuple[str, ...]] = ("/", "\\")


def find_any(text: str, chars: t.Container[str], start: int = 0) -> int:
    """Return the index of the first character in *chars*, or ``-1``."""
    return next(
        (index for index in range(start, len(text)) if text[index] in chars),
        -1,
    )


def _split_after_separators(path: str, policy: PathPolicy) -> tuple[str, str]:
    """Split *path* after its leading run of separators."""
    for index, char in enumerate(path):
        if not policy.is_separator(char):
            return path[:index], path[index:]
    return path, ""


def is_drive(text: str) -> bool:
    """
    Return ``True`` when *text* names a drive.

    A drive is a non-empty name followed by ``:`` and at most one trailing
    ``/`` or ``\\``. Names are not limited to single letters so that shell
    provider drives such as ``env:`` or ``HKLM:`` qualify.
    """
    if len(text) < 2:
        return False

    end = len(text)
    if text[-1] in _ANY_SEPARATOR:
        end -= 1
    if text[end - 1] != ":":
        return False

    name = text[: end - 1]
    return bool(name) and not any(char in _DRIVE_DISALLOWED for char in name)


def _resolve_posix(path: str, policy: PathPolicy) -> tuple[str, str]:
    strip = "".join(policy.separators)
    if path.startswith(policy.separators):
        return policy.separator, path.lstrip(strip)

    # The path might still name a virtual drive, e.g. ``variable:/foo``.
    sep_index = find_any(path, _ANY_SEPARATOR)
    if sep_index > 1 and is_drive(path[: sep_index + 1]):
        return path[: sep_index + 1], path[sep_index + 1 :].lstrip(strip)
    if sep_index < 0 and is_drive(path):
        return path, ""

    # Drive-relative virtual paths such as ``env:FOO/BAR``.
    colon = path.find(":")
    if (
        colon > 0
        and (sep_index < 0 or colon < sep_index)
        and is_drive(path[: colon + 1])
    ):
        return path[: colon + 1], path[colon + 1 :].lstrip(strip)
    return "", path


def _resolve_windows(path: str, policy: PathPolicy) -> tuple[str, str]:
    if (
        policy.supports_unc
        and len(path) >= 2  # noqa: PLR2004 - two leading separators
        and policy.is_separator(path[0])
        and policy.is_separator(path[1])
    ):
        found = find_any(path, policy.separators, 2)
        if found < 0:
            if len(path) > 2:  # noqa: PLR2004
                return _split_after_separators(path, policy)
            return path, ""
        if found == 2:  # noqa: PLR2004
            # Three or more leading separators is not a valid UNC path.
            return _split_after_separators(path, policy)
        # ``\\server\share\``: the share name belongs to the prefix too.
        share_end = find_any(path, policy.separators, found + 1)
        if share_end < 0:
            # ``\\server\share`` names the same root as ``\\server\share\``.
            if found + 1 < len(path):
                return path + policy.separator, ""
            return path, ""
        return path[: share_end + 1], path[share_end + 1 :]

    sep_index = find_any(path, policy.separators)
    if sep_index == 0:
        return _split_after_separators(path, policy)
    if sep_index < 0:
        return (path, "") if is_drive(path) else ("", path)

    candidate = path[: sep_index + 1]
    if is_drive(candidate):
        return candidate, path[sep_index + 1 :].lstrip("".join(policy.separators))
    # The separator belongs to an ordinary component.
    return "", path


def resolve_prefix(path: str, *, policy: PathPolicy | None = None) -> tuple[str, str]:
    """
    Split *path* into ``(prefix, rest)``.

    Parameters
    ----------
    path : str
        The path to inspect. Nothing is read from the filesystem.
    policy : PathPolicy | None, optional
        Path rules to apply. Defaults to the process policy.

    Returns
    -------
    tuple[str, str]
        The root-indicating prefix (empty for relative paths) and the
        remaining relative component string.
    """
    policy = resolve_policy(policy)
    if policy.supports_drive_letters:
        return _resolve_windows(path, policy)
    return _resolve_posix(path, policy)


def split_components(rest: str, policy: PathPolicy) -> list[str]:
    """Split *rest* on the policy separators, dropping empty pieces."""
    pieces = [rest]
    for sep in policy.separators:
        pieces = [part for piece in pieces for part in piece.split(sep)]
    return [piece for piece in pieces if piece]


__all__ = ["find_any", "is_drive", "resolve_prefix", "split_components"]
