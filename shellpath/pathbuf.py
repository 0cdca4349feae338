"""Incrementally built paths.

:class:`PathBuf` applies the same prefix and ``.``/``..`` rules as
:mod:`shellpath.filepath` while a path is assembled one fragment at a time,
deferring normalization until the components are read.
"""

from __future__ import annotations

import logging
import typing as t

from .errors import PathFormatError
from .filepath import CURRENT_DIR, PARENT_DIR
from .platform import PathPolicy, resolve_policy

logger = logging.getLogger(__name__)

# Stands in for the root of an absolute path; joining it renders the leading
# separator.
ROOT: t.Final[str] = ""

_DRIVE_MARK: t.Final[str] = ":"


class PathBuf:
    """
    A mutable path assembled from fragments.

    Parameters
    ----------
    path : str | None, optional
        Initial fragment to append.
    policy : PathPolicy | None, optional
        Path rules to apply. Defaults to the process policy.

    Raises
    ------
    PathFormatError
        If *path* contains a ``:`` outside the leading drive slot on a
        drive-letter platform.
    """

    __slots__ = ("_components", "_normalized", "policy")

    def __init__(
        self, path: str | None = None, *, policy: PathPolicy | None = None
    ) -> None:
        self.policy = resolve_policy(policy)
        self._components: list[str] = []
        self._normalized = True
        if path is not None:
            self.append(path)

    @classmethod
    def join(
        cls, first: str, *rest: str, policy: PathPolicy | None = None
    ) -> PathBuf:
        """Return a buffer built by appending *first* and then each of *rest*."""
        buf = cls(first, policy=policy)
        for fragment in rest:
            buf.append(fragment)
        return buf

    @property
    def is_empty(self) -> bool:
        """Return ``True`` when the buffer holds no components."""
        return not self._components

    def copy(self) -> PathBuf:
        """Return an independent copy of the buffer."""
        clone = type(self)(policy=self.policy)
        clone._components = list(self._components)
        clone._normalized = self._normalized
        return clone

    __copy__ = copy

    def __deepcopy__(self, memo: dict[int, t.Any]) -> PathBuf:
        """Return an independent copy; components are immutable strings."""
        return self.copy()

    def _is_drive_component(self, component: str) -> bool:
        return self.policy.supports_drive_letters and component.endswith(_DRIVE_MARK)

    def append(self, path: str) -> None:
        """
        Append the components of *path*.

        A fragment starting with a separator discards everything appended so
        far and restarts from the root. On drive-letter platforms a fragment
        starting with a drive (``D:`` or ``D:\\x``) restarts from that drive.

        Raises
        ------
        PathFormatError
            If a component contains ``:`` anywhere but the end of the first
            component on a drive-letter platform. Fragments processed before
            the error may already have reset the buffer.
        """
        self._normalized = False

        if path.startswith(self.policy.separators):
            logger.debug("Absolute fragment %r resets the path to the root", path)
            self._components = [ROOT]

        pieces = [path]
        for sep in self.policy.separators:
            pieces = [part for piece in pieces for part in piece.split(sep)]

        for index, piece in enumerate(pieces):
            if not piece:
                continue

            if self.policy.supports_drive_letters:
                colon = piece.rfind(_DRIVE_MARK)
                if index == 0 and colon == len(piece) - 1:
                    logger.debug("Drive %r resets the path", piece)
                    self._components = [piece]
                    continue
                if colon >= 0:
                    raise PathFormatError(
                        path, "paths cannot contain ':' except after a drive name"
                    )

            if piece != CURRENT_DIR:
                self._components.append(piece)

    def pop(self) -> str:
        """
        Remove and return the last component.

        Popping a lone root returns the canonical separator; popping an empty
        buffer returns ``""``.
        """
        if not self._components:
            return ""
        if self._components == [ROOT]:
            self._components.clear()
            return self.policy.separator
        return self._components.pop()

    def _can_collapse(self, folded: list[str]) -> bool:
        last = folded[-1]
        if last in (PARENT_DIR, ROOT):
            return False
        # A lone leading drive cannot be escaped either.
        return not (len(folded) == 1 and self._is_drive_component(last))

    def normalize(self) -> None:
        """Collapse ``.`` and ``..`` components; a no-op when already clean."""
        if self._normalized:
            return

        folded: list[str] = []
        for component in self._components:
            if component == CURRENT_DIR:
                continue
            if component == PARENT_DIR and folded and self._can_collapse(folded):
                folded.pop()
            else:
                folded.append(component)

        self._components = folded
        self._normalized = True

    def components(self) -> tuple[str, ...]:
        """Return the normalized components, the root as ``""``."""
        self.normalize()
        return tuple(self._components)

    def to_string(self) -> str:
        """Render the normalized path with the canonical separator."""
        self.normalize()
        separator = self.policy.separator
        if len(self._components) == 1:
            only = self._components[0]
            if self._is_drive_component(only):
                return only + separator
            if only == ROOT:
                return separator
        return separator.join(self._components)

    def __str__(self) -> str:
        """Return :meth:`to_string`."""
        return self.to_string()

    def __repr__(self) -> str:
        """Return a debug representation."""
        return f"PathBuf({self.to_string()!r}, policy={self.policy.name})"

    def __eq__(self, other: object) -> bool:
        """Compare normalized components under the buffer's policy."""
        if not isinstance(other, PathBuf):
            return NotImplemented
        mine = self.components()
        theirs = other.components()
        return len(mine) == len(theirs) and all(
            self.policy.os_eq(a, b) for a, b in zip(mine, theirs, strict=True)
        )

    __hash__ = None  # type: ignore[assignment]

    def parent(self) -> str:
        """
        Return the rendering of the buffer without its last component.

        Returns ``""`` when the buffer is empty, is a lone root, or holds a
        single component.
        """
        clone = self.copy()
        popped = clone.pop()
        if popped in ("", self.policy.separator) or clone.is_empty:
            return ""
        return clone.to_string()


__all__ = ["ROOT", "PathBuf"]
