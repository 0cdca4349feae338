"""Unit tests for the incremental path buffer."""

from __future__ import annotations

import copy

import pytest

from shellpath.errors import PathFormatError
from shellpath.pathbuf import ROOT, PathBuf
from shellpath.platform import POSIX_POLICY, WINDOWS_POLICY


def posix(path: str | None = None) -> PathBuf:
    """Return a POSIX buffer seeded with *path*."""
    return PathBuf(path, policy=POSIX_POLICY)


def windows(path: str | None = None) -> PathBuf:
    """Return a Windows buffer seeded with *path*."""
    return PathBuf(path, policy=WINDOWS_POLICY)


class TestAppend:
    """Tests for PathBuf.append()."""

    def test_relative_fragments_accumulate(self) -> None:
        """Relative fragments extend the path."""
        buf = posix("a/b")
        buf.append("c/./d")
        assert buf.components() == ("a", "b", "c", "d")
        assert str(buf) == "a/b/c/d"

    def test_absolute_fragment_resets_buffer(self) -> None:
        """A leading separator discards everything appended so far."""
        buf = posix("a/b")
        buf.append("/c/d")
        assert buf.components() == (ROOT, "c", "d")
        assert str(buf) == "/c/d"

    def test_windows_root_fragment_resets_buffer(self) -> None:
        """Either slash resets a Windows buffer to the root."""
        buf = windows("C:\\a")
        buf.append("/x")
        assert buf.components() == (ROOT, "x")
        assert str(buf) == "\\x"

    def test_drive_fragment_resets_buffer(self) -> None:
        """A leading drive replaces the whole path on Windows."""
        buf = windows("C:\\foo")
        buf.append("D:\\bar")
        assert buf.components() == ("D:", "bar")
        assert str(buf) == "D:\\bar"

    def test_virtual_drive_fragment_resets_buffer(self) -> None:
        """Shell provider drives follow the same rule."""
        buf = windows("C:\\foo")
        buf.append("env:")
        assert str(buf) == "env:\\"

    @pytest.mark.parametrize("fragment", ["foo\\b:ar", "C:foo", "\\C:", "a\\b:"])
    def test_misplaced_colon_is_rejected(self, fragment: str) -> None:
        """Colons outside the leading drive slot are format errors."""
        buf = windows("C:\\base")
        with pytest.raises(PathFormatError, match="':'") as excinfo:
            buf.append(fragment)
        assert excinfo.value.path == fragment

    def test_failed_append_keeps_earlier_reset(self) -> None:
        """Pieces processed before the error stay applied."""
        buf = windows("a\\b")
        with pytest.raises(PathFormatError):
            buf.append("\\c\\d:e")
        assert buf.components() == (ROOT, "c")

    def test_posix_allows_colons(self) -> None:
        """Colons are ordinary characters in POSIX components."""
        buf = posix("/srv")
        buf.append("a:b/c:")
        assert buf.components() == (ROOT, "srv", "a:b", "c:")

    def test_constructor_rejects_bad_fragment(self) -> None:
        """Seeding a buffer validates the initial fragment too."""
        with pytest.raises(PathFormatError):
            windows("x:y")

    def test_join_appends_each_fragment(self) -> None:
        """join() is a shortcut for appending several fragments."""
        buf = PathBuf.join("/a", "b", "../c", policy=POSIX_POLICY)
        assert str(buf) == "/a/c"
        assert str(PathBuf.join("a", "/b", "c", policy=POSIX_POLICY)) == "/b/c"


class TestNormalize:
    """Tests for PathBuf.normalize() and rendering."""

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("a/b/../c", ("a", "c")),
            ("../a", ("..", "a")),
            ("a/../..", ("..",)),
            ("/..", (ROOT, "..")),
            ("/a/../../b", (ROOT, "..", "b")),
            ("./.", ()),
        ],
    )
    def test_posix_folding(self, path: str, expected: tuple[str, ...]) -> None:
        """Dot-dot never escapes the root sentinel."""
        assert posix(path).components() == expected

    def test_drive_is_not_escaped(self) -> None:
        """A lone leading drive absorbs no ``..``."""
        buf = windows("C:\\foo\\..\\..")
        assert buf.components() == ("C:", "..")
        assert str(buf) == "C:\\.."

    def test_drive_renders_with_separator(self) -> None:
        """A bare drive renders as its root directory."""
        assert str(windows("C:")) == "C:\\"
        assert str(windows("C:\\")) == "C:\\"

    def test_root_renders_as_separator(self) -> None:
        """A lone root renders as one separator."""
        assert str(posix("/")) == "/"
        assert str(windows("/")) == "\\"

    def test_empty_buffer_renders_empty(self) -> None:
        """Nothing appended renders as an empty string."""
        buf = posix()
        assert buf.is_empty
        assert str(buf) == ""
        assert buf.components() == ()

    def test_normalize_is_idempotent(self) -> None:
        """Normalizing twice gives the same components."""
        buf = posix("a/./b/../c")
        buf.normalize()
        first = buf.components()
        buf.normalize()
        assert buf.components() == first

    def test_append_after_normalize_renormalizes(self) -> None:
        """New fragments mark the buffer dirty again."""
        buf = posix("/a/b")
        assert buf.components() == (ROOT, "a", "b")
        buf.append("..")
        assert buf.components() == (ROOT, "a")

    def test_repr_shows_rendering_and_policy(self) -> None:
        """The repr names the rendered path and policy."""
        assert repr(windows("C:/x")) == "PathBuf('C:\\\\x', policy=windows)"


class TestPop:
    """Tests for PathBuf.pop() and PathBuf.parent()."""

    def test_pop_walks_back_to_empty(self) -> None:
        """Popping returns components, then the root, then nothing."""
        buf = posix("/a")
        assert buf.pop() == "a"
        assert buf.pop() == "/"
        assert buf.is_empty
        assert buf.pop() == ""

    def test_pop_windows_root_returns_backslash(self) -> None:
        """The canonical separator represents a popped root."""
        buf = windows("\\")
        assert buf.pop() == "\\"

    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("/a/b", "/a"),
            ("/a", "/"),
            ("/", ""),
            ("a", ""),
            ("a/b", "a"),
        ],
    )
    def test_parent_posix(self, path: str, expected: str) -> None:
        """The parent renders the buffer minus its last component."""
        assert posix(path).parent() == expected

    def test_parent_of_empty_buffer(self) -> None:
        """An empty buffer has no parent."""
        assert posix().parent() == ""

    def test_parent_windows(self) -> None:
        """A drive's child has the drive root as parent."""
        assert windows("C:\\a").parent() == "C:\\"
        assert windows("C:\\a\\b").parent() == "C:\\a"

    def test_parent_leaves_buffer_untouched(self) -> None:
        """parent() works on a copy."""
        buf = posix("/a/b")
        buf.parent()
        assert str(buf) == "/a/b"


class TestCopy:
    """Tests for copying buffers."""

    def test_copy_is_independent(self) -> None:
        """Mutating a copy leaves the original alone."""
        buf = posix("/a")
        clone = buf.copy()
        clone.append("b")
        assert str(buf) == "/a"
        assert str(clone) == "/a/b"

    @pytest.mark.parametrize("copier", [copy.copy, copy.deepcopy])
    def test_copy_module_support(self, copier: object) -> None:
        """The copy module produces independent buffers."""
        buf = windows("C:\\a")
        clone = copier(buf)  # type: ignore[operator]
        clone.pop()
        assert str(buf) == "C:\\a"
        assert clone.policy is WINDOWS_POLICY

    def test_equality_follows_policy_case_rules(self) -> None:
        """Buffers compare by normalized components."""
        assert windows("C:\\Foo\\x\\..") == windows("c:/foo")
        assert posix("/Foo") != posix("/foo")
