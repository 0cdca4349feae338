"""String-level path algebra: normalization, joining and relativization.

Every function here is pure. Paths are interpreted under a
:class:`~shellpath.platform.PathPolicy`; when none is passed the process-wide
default policy applies.
"""

from __future__ import annotations

import logging
import typing as t

from ._prefix import find_any, is_drive, resolve_prefix, split_components
from .platform import PathPolicy, resolve_policy

logger = logging.getLogger(__name__)

CURRENT_DIR: t.Final[str] = "."
PARENT_DIR: t.Final[str] = ".."


def _canonical_prefix(prefix: str, policy: PathPolicy) -> str:
    """Rewrite the alternate separators in *prefix* to the canonical one."""
    for sep in policy.separators[1:]:
        prefix = prefix.replace(sep, policy.separator)
    return prefix


def _fold(parts: t.Iterable[str]) -> list[str]:
    """Collapse ``.`` and ``..`` entries in *parts*."""
    folded: list[str] = []
    for part in parts:
        if part == CURRENT_DIR:
            continue
        if part == PARENT_DIR and folded and folded[-1] != PARENT_DIR:
            folded.pop()
        else:
            folded.append(part)
    return folded


def _normalize(path: str, policy: PathPolicy) -> str:
    prefix, rest = resolve_prefix(path, policy=policy)
    body = policy.separator.join(_fold(split_components(rest, policy)))
    # A prefix followed by components always ends in a separator or ``:``.
    return _canonical_prefix(prefix, policy) + body or CURRENT_DIR


def normalize(path: str, *, policy: PathPolicy | None = None) -> str:
    """
    Return *path* with redundant separators, ``.`` and ``..`` removed.

    Leading ``..`` components are kept since nothing precedes them to
    collapse into. A path reducing to nothing becomes ``"."``; an absolute
    path reducing to nothing becomes its prefix.

    Examples
    --------
    >>> from shellpath.platform import POSIX_POLICY
    >>> normalize("a/./b/../c", policy=POSIX_POLICY)
    'a/c'
    >>> normalize("../../a", policy=POSIX_POLICY)
    '../../a'
    """
    return _normalize(path, resolve_policy(policy))


def _first_non_separator(text: str, policy: PathPolicy) -> int:
    return next(
        (index for index, char in enumerate(text) if not policy.is_separator(char)),
        -1,
    )


def _is_rooted(path: str, policy: PathPolicy) -> bool:
    """
    Return ``True`` when *path* discards the base it is joined onto.

    Only a leading separator or, on drive-letter platforms, a one-letter
    drive such as ``D:`` counts. Virtual drives (``env:``) and names like
    ``12:30.log`` join as ordinary components.
    """
    if policy.is_separator(path[0]):
        return True
    return (
        policy.supports_drive_letters
        and len(path) >= 2  # noqa: PLR2004 - letter and colon
        and path[1] == ":"
        and path[0].isascii()
        and path[0].isalpha()
    )


def _join(a: str, b: str, policy: PathPolicy) -> str:
    """Join *a* and *b* with a single separator unless *b* is rooted."""
    if _is_rooted(b, policy):
        return b

    _, a_rest = resolve_prefix(a, policy=policy)
    if not a_rest and (policy.is_separator(a[-1]) or a[-1] == ":"):
        # *a* is a bare prefix such as ``/``, ``C:\`` or ``env:``.
        return a + b
    return a.rstrip("".join(policy.separators)) + policy.separator + b


def _join_on_drive(a: str, b: str, policy: PathPolicy) -> str | None:
    """
    Return *b* re-rooted on *a*'s drive, or ``None`` to use a plain join.

    A suffix such as ``\\baz`` names the root of the current drive, so
    ``C:\\foo`` joined with it is ``C:\\baz``.
    """
    sep_index = find_any(a, policy.separators)
    if sep_index <= 1:
        return None
    drive = a[: sep_index + 1]
    if not is_drive(drive):
        return None

    start = _first_non_separator(b, policy)
    if start < 0:
        return policy.separator
    if policy.is_separator(b[1]) and find_any(b, policy.separators, start) >= 0:
        # A genuine UNC path is rooted independently of the drive.
        return None
    # Includes ``\\foo``: without a share it is not UNC, just root-relative.
    return drive + b[start:]


def combine(
    a: str,
    b: str,
    *,
    normalize: bool = False,
    policy: PathPolicy | None = None,
) -> str:
    """
    Join *b* onto *a*.

    Parameters
    ----------
    a : str
        The base path.
    b : str
        The path to append. When it is rooted (a leading separator, or a
        drive letter on drive-letter platforms) it replaces *a*, except that
        on drive-letter platforms a suffix starting with a single separator
        keeps *a*'s drive.
    normalize : bool, optional
        Normalize the joined path before returning it.
    policy : PathPolicy | None, optional
        Path rules to apply. Defaults to the process policy.

    Returns
    -------
    str
        The combined path.
    """
    policy = resolve_policy(policy)
    if not b:
        result = a
    elif not a:
        result = b
    else:
        result = None
        if policy.supports_drive_letters and policy.is_separator(b[0]):
            result = _join_on_drive(a, b, policy)
        if result is None:
            result = _join(a, b, policy)

    return _normalize(result, policy) if normalize else result


def common_length(
    left: t.Sequence[str],
    right: t.Sequence[str],
    *,
    policy: PathPolicy | None = None,
) -> int:
    """Return how many leading components *left* and *right* share."""
    policy = resolve_policy(policy)
    count = 0
    for lhs, rhs in zip(left, right, strict=False):
        if not policy.os_eq(lhs, rhs):
            break
        count += 1
    return count


def relative_path(
    path: str, relative_to: str, *, policy: PathPolicy | None = None
) -> str:
    """
    Return the shortest path leading from *relative_to* to *path*.

    Both arguments should be absolute. When their prefixes differ (for
    example two drives) no relative path exists and the normalized *path*
    is returned unchanged.
    """
    policy = resolve_policy(policy)
    path = _normalize(path, policy)
    relative_to = _normalize(relative_to, policy)

    path_prefix, path_rest = resolve_prefix(path, policy=policy)
    base_prefix, base_rest = resolve_prefix(relative_to, policy=policy)
    if not policy.os_eq(path_prefix, base_prefix):
        logger.debug(
            "Prefixes of %r and %r differ; returning the path unchanged",
            path,
            relative_to,
        )
        return path

    target = split_components(path_rest, policy)
    base = split_components(base_rest, policy)
    common = common_length(target, base, policy=policy)

    parts = [PARENT_DIR] * (len(base) - common) + target[common:]
    return policy.separator.join(parts) or CURRENT_DIR


def components(
    path: str, *, policy: PathPolicy | None = None
) -> tuple[str, tuple[str, ...]]:
    """Return the prefix of *path* and its non-empty components."""
    policy = resolve_policy(policy)
    prefix, rest = resolve_prefix(path, policy=policy)
    return prefix, tuple(split_components(rest, policy))


def starts_with_components(
    path: t.Sequence[str],
    prefix: t.Sequence[str],
    *,
    policy: PathPolicy | None = None,
) -> bool:
    """Return ``True`` when *prefix* is a leading run of *path*."""
    if len(prefix) > len(path):
        return False
    policy = resolve_policy(policy)
    return common_length(path, prefix, policy=policy) == len(prefix)


def starts_with(
    path: str,
    with_: str,
    *,
    normalize: bool = True,
    policy: PathPolicy | None = None,
) -> bool:
    """
    Return ``True`` when *path* lies at or under *with_*.

    Matching is component-wise, so ``/foo/barbaz`` does not start with
    ``/foo/bar``. Set *normalize* to ``False`` when both paths are already
    normalized.
    """
    policy = resolve_policy(policy)
    if normalize:
        path = _normalize(path, policy)
        with_ = _normalize(with_, policy)

    path_prefix, path_parts = components(path, policy=policy)
    with_prefix, with_parts = components(with_, policy=policy)
    if not policy.os_eq(path_prefix, with_prefix):
        return False
    return starts_with_components(path_parts, with_parts, policy=policy)


def strip_prefix(
    path: t.Sequence[str],
    prefix: t.Sequence[str],
    *,
    policy: PathPolicy | None = None,
) -> t.Sequence[str]:
    """
    Return the components of *path* following *prefix*.

    When *prefix* does not match, *path* is returned whole; compare lengths
    to tell the two outcomes apart.
    """
    if starts_with_components(path, prefix, policy=policy):
        return path[len(prefix) :]
    return path


def is_absolute(path: str, *, policy: PathPolicy | None = None) -> bool:
    """Return ``True`` when *path* carries a root, drive or UNC prefix."""
    prefix, _ = resolve_prefix(path, policy=policy)
    return prefix != ""


def _rfind(text: str, predicate: t.Callable[[str], bool], start: int) -> int:
    return next(
        (index for index in range(start, -1, -1) if predicate(text[index])),
        -1,
    )


def parent(path: str, *, policy: PathPolicy | None = None) -> str:
    """
    Return *path* without its last component.

    Trailing separators are ignored. The result is the bare prefix when
    only one component sits under it, and ``""`` when *path* has no parent
    (a bare prefix or a single relative component).
    """
    policy = resolve_policy(policy)
    prefix, rest = resolve_prefix(path, policy=policy)

    def not_separator(char: str) -> bool:
        return not policy.is_separator(char)

    end = _rfind(rest, not_separator, len(rest) - 1)
    if end < 0:
        return ""

    end = _rfind(rest, policy.is_separator, end)
    if end < 0:
        return prefix

    end = _rfind(rest, not_separator, end)
    if end < 0:
        return prefix
    return prefix + rest[: end + 1]


def trim_ending_separator(path: str, *, policy: PathPolicy | None = None) -> str:
    """Strip trailing separators unless *path* is a lone separator."""
    policy = resolve_policy(policy)
    if path in policy.separators:
        return path
    return path.rstrip("".join(policy.separators))


__all__ = [
    "CURRENT_DIR",
    "PARENT_DIR",
    "combine",
    "common_length",
    "components",
    "is_absolute",
    "normalize",
    "parent",
    "relative_path",
    "starts_with",
    "starts_with_components",
    "strip_prefix",
    "trim_ending_separator",
]
