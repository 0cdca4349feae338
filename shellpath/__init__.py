"""Cross-platform path algebra for shell-style path strings.

Paths are parsed, normalized, joined and relativized without touching the
filesystem, following Windows, POSIX and shell virtual-drive (``env:``,
``variable:``) grammars.
"""

from __future__ import annotations

from ._prefix import is_drive, resolve_prefix
from .errors import PathFormatError, ShellPathError
from .filepath import (
    combine,
    common_length,
    components,
    is_absolute,
    normalize,
    parent,
    relative_path,
    starts_with,
    starts_with_components,
    strip_prefix,
    trim_ending_separator,
)
from .formatting import format_pretty, format_relative, home_path
from .pathbuf import PathBuf
from .platform import (
    PLATFORM_OVERRIDE_ENV,
    POSIX_POLICY,
    WINDOWS_POLICY,
    PathPolicy,
    default_policy,
    policy_for,
    reset_default_policy,
)

__all__ = [
    "PLATFORM_OVERRIDE_ENV",
    "POSIX_POLICY",
    "WINDOWS_POLICY",
    "PathBuf",
    "PathFormatError",
    "PathPolicy",
    "ShellPathError",
    "combine",
    "common_length",
    "components",
    "default_policy",
    "format_pretty",
    "format_relative",
    "home_path",
    "is_absolute",
    "is_drive",
    "normalize",
    "parent",
    "policy_for",
    "relative_path",
    "reset_default_policy",
    "resolve_prefix",
    "starts_with",
    "starts_with_components",
    "strip_prefix",
    "trim_ending_separator",
]
