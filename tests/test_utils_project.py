"""
Tests for the project utility module.

Tests cover:
- Finding the .mvn/ marker at the start directory or an ancestor
- Falling back to the start directory when no marker exists
- Nonexistent start directories and files named like the marker
"""

from pathlib import Path

from mvnlaunch.utils.project import MAVEN_PROJECT_MARKER, find_ancestor_with_marker


class TestFindAncestorWithMarker:
    """Tests for find_ancestor_with_marker function."""

    def test_marker_at_start(self, tmp_path: Path) -> None:
        """Test finding the marker in the start directory itself."""
        (tmp_path / ".mvn").mkdir()
        assert find_ancestor_with_marker(tmp_path) == tmp_path

    def test_marker_at_ancestor(self, tmp_path: Path) -> None:
        """Test /a/b/c with .mvn only at /a returns /a."""
        a = tmp_path / "a"
        (a / ".mvn").mkdir(parents=True)
        start = a / "b" / "c"
        start.mkdir(parents=True)

        assert find_ancestor_with_marker(start) == a

    def test_closest_marker_wins(self, tmp_path: Path) -> None:
        """Test that the nearest ancestor with a marker is returned."""
        outer = tmp_path / "outer"
        inner = outer / "inner"
        (outer / ".mvn").mkdir(parents=True)
        (inner / ".mvn").mkdir(parents=True)
        start = inner / "module"
        start.mkdir()

        assert find_ancestor_with_marker(start) == inner

    def test_no_marker_returns_start(self, tmp_path: Path) -> None:
        """Test /a/b/c with no .mvn anywhere returns the start unchanged."""
        start = tmp_path / "a" / "b" / "c"
        start.mkdir(parents=True)

        assert find_ancestor_with_marker(start) == start

    def test_nonexistent_start(self, tmp_path: Path) -> None:
        """Test that a missing start directory is treated as not found."""
        start = tmp_path / "does" / "not" / "exist"
        assert find_ancestor_with_marker(start) == start

    def test_marker_must_be_directory(self, tmp_path: Path) -> None:
        """Test that a regular file named .mvn is not a marker."""
        (tmp_path / ".mvn").write_text("")
        start = tmp_path / "module"
        start.mkdir()

        assert find_ancestor_with_marker(start) == start

    def test_custom_marker(self, tmp_path: Path) -> None:
        """Test searching for a different marker directory."""
        (tmp_path / ".mvnw").mkdir()
        start = tmp_path / "x"
        start.mkdir()

        assert find_ancestor_with_marker(start, ".mvnw") == tmp_path

    def test_relative_start_found(self, tmp_path: Path, monkeypatch) -> None:
        """Test that a relative start is resolved against the cwd."""
        (tmp_path / ".mvn").mkdir()
        (tmp_path / "module").mkdir()
        monkeypatch.chdir(tmp_path)

        assert find_ancestor_with_marker(Path("module")).resolve() == tmp_path.resolve()

    def test_relative_start_not_found(self, tmp_path: Path, monkeypatch) -> None:
        """Test that a relative start is returned unchanged when no marker exists."""
        (tmp_path / "module").mkdir()
        monkeypatch.chdir(tmp_path)

        assert find_ancestor_with_marker(Path("module")) == Path("module")

    def test_default_marker_is_mvn(self) -> None:
        assert MAVEN_PROJECT_MARKER == ".mvn"
