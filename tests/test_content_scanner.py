"""
Tests for content pattern resolution.

Tests cover:
- Brace expansion
- ResolvedContentSet matching, dedup, order and restartability
- NoMatchWarning collection
"""

import logging
from pathlib import Path

import pytest

from theme_config.config import parse_record
from theme_config.content import ResolvedContentSet, expand_braces, resolve_content_set
from theme_config.content.globbing import split_anchor
from theme_config.errors import NoMatchWarning


def _record(*patterns: str):
    return parse_record({"contentPatterns": list(patterns)})


class TestExpandBraces:
    """Tests for brace expansion."""

    def test_no_braces(self):
        assert expand_braces("src/**/*.html") == ["src/**/*.html"]

    def test_simple_group(self):
        """Alternatives expand in declaration order."""
        assert expand_braces("src/**/*.{html,rs}") == ["src/**/*.html", "src/**/*.rs"]

    def test_multiple_groups(self):
        """Groups expand as a cartesian product."""
        assert expand_braces("{a,b}/{x,y}.js") == ["a/x.js", "a/y.js", "b/x.js", "b/y.js"]

    def test_nested_groups(self):
        """Nested groups are expanded recursively."""
        assert expand_braces("*.{html,{ts,tsx}}") == ["*.html", "*.ts", "*.tsx"]

    def test_single_option_is_literal(self):
        """A group without a comma is not an alternation."""
        assert expand_braces("file.{html}") == ["file.{html}"]

    def test_unbalanced_is_literal(self):
        assert expand_braces("file.{html,rs") == ["file.{html,rs"]

    def test_duplicates_removed(self):
        assert expand_braces("*.{html,html}") == ["*.html"]


class TestSplitAnchor:
    """Tests for pattern anchoring."""

    def test_relative_dot_slash(self, tmp_path: Path):
        """A leading ./ is dropped."""
        assert split_anchor("./src/*.html", tmp_path) == (tmp_path, "src/*.html")

    def test_absolute(self, tmp_path: Path):
        """Absolute patterns glob from the filesystem anchor."""
        base, relative = split_anchor(str(tmp_path / "*.html"), Path("."))
        assert base == Path(tmp_path.anchor)
        assert (base / relative) == tmp_path / "*.html"

    def test_trailing_globstar(self, tmp_path: Path):
        """A trailing ** is widened to match files, not just directories."""
        assert split_anchor("src/**", tmp_path) == (tmp_path, "src/**/*")
        assert split_anchor("**", tmp_path) == (tmp_path, "**/*")
        assert split_anchor("src/**/*.html", tmp_path) == (tmp_path, "src/**/*.html")


class TestResolvedContentSet:
    """Tests for content set resolution."""

    def test_example_project(self, project_dir: Path):
        """Braces, ** and plain names resolve against the root."""
        content = resolve_content_set(
            _record("./src/**/*.{html,ext}", "index.html"), project_dir
        )
        assert content.as_set() == {
            Path("src/a.html"),
            Path("src/b.ext"),
            Path("index.html"),
        }
        assert content.warnings == []

    def test_deduplicates_across_patterns(self, project_dir: Path):
        """A file matched by several patterns is yielded once."""
        content = resolve_content_set(_record("**/*.html", "index.html", "src/a.html"), project_dir)
        paths = list(content)
        assert len(paths) == len(set(paths))
        assert set(paths) == {Path("src/a.html"), Path("index.html")}

    def test_stable_order(self, project_dir: Path):
        """Patterns are processed in order; matches within a pattern are sorted."""
        content = resolve_content_set(_record("index.html", "src/*"), project_dir)
        assert list(content) == [Path("index.html"), Path("src/a.html"), Path("src/b.ext")]

    def test_restartable(self, project_dir: Path):
        """Two iterations over an unchanged tree are equal."""
        content = resolve_content_set(_record("./src/**/*.{html,ext}", "index.html"), project_dir)
        assert list(content) == list(content)
        assert content.as_set() == content.as_set()

    def test_lazy(self, project_dir: Path):
        """The filesystem is read at iteration time, not at resolution time."""
        content = resolve_content_set(_record("src/*.html"), project_dir)
        (project_dir / "src" / "c.html").write_text("<p></p>")
        assert Path("src/c.html") in content.as_set()

    def test_directories_excluded(self, project_dir: Path):
        """Only regular files are matched."""
        content = resolve_content_set(_record("*"), project_dir)
        assert Path("src") not in content.as_set()
        assert Path("other.txt") in content.as_set()

    def test_contains(self, project_dir: Path):
        content = resolve_content_set(_record("index.html"), project_dir)
        assert "index.html" in content
        assert Path("other.txt") not in content
        assert 42 not in content

    def test_no_match_warning(self, project_dir: Path):
        """A pattern matching nothing is a warning, not an error."""
        content = resolve_content_set(_record("index.html", "templates/**/*.jinja"), project_dir)
        assert content.as_set() == {Path("index.html")}
        assert content.warnings == [NoMatchWarning("templates/**/*.jinja")]
        assert content.warnings[0].pattern == "templates/**/*.jinja"

    def test_no_match_logged(self, project_dir: Path, caplog):
        """Iterating logs a warning for each empty pattern."""
        content = resolve_content_set(_record("missing/*.html"), project_dir)
        with caplog.at_level(logging.WARNING, logger="theme_config.content.scanner"):
            assert list(content) == []
        assert any("missing/*.html" in message for message in caplog.messages)

    def test_duplicate_pattern_not_a_miss(self, project_dir: Path):
        """A pattern whose matches were all seen earlier still matched."""
        content = resolve_content_set(_record("index.html", "index.html"), project_dir)
        assert content.warnings == []

    def test_absolute_pattern(self, project_dir: Path, tmp_path_factory):
        """Files outside the root come back as absolute paths."""
        elsewhere = tmp_path_factory.mktemp("shared")
        (elsewhere / "layout.html").write_text("<main></main>")
        content = resolve_content_set(
            _record("index.html", str(elsewhere / "*.html")), project_dir
        )
        assert content.as_set() == {Path("index.html"), elsewhere / "layout.html"}

    def test_repr(self, tmp_path: Path):
        content = ResolvedContentSet(("index.html",), tmp_path)
        assert "index.html" in repr(content)

    @pytest.mark.parametrize("pattern", ["./", "."])
    def test_bare_directory_pattern_matches_nothing(self, project_dir: Path, pattern):
        """A pattern naming only the root matches no files."""
        content = resolve_content_set(_record(pattern), project_dir)
        assert content.as_set() == frozenset()
        assert content.warnings == [NoMatchWarning(pattern)]

    @pytest.mark.parametrize("pattern", ["src/**", "./src/**"])
    def test_trailing_globstar_matches_files(self, project_dir: Path, pattern):
        """A trailing ** means every file below the directory."""
        content = resolve_content_set(_record(pattern), project_dir)
        assert content.as_set() == {Path("src/a.html"), Path("src/b.ext")}
        assert content.warnings == []

    def test_bare_globstar_matches_everything(self, project_dir: Path):
        content = resolve_content_set(_record("**"), project_dir)
        assert content.as_set() == {
            Path("src/a.html"),
            Path("src/b.ext"),
            Path("index.html"),
            Path("other.txt"),
        }

    def test_no_match_logged_once(self, project_dir: Path, caplog):
        """Consuming the set several times logs each miss only once."""
        content = resolve_content_set(_record("index.html", "missing/*.html"), project_dir)
        with caplog.at_level(logging.WARNING, logger="theme_config.content.scanner"):
            list(content)
            content.as_set()
            assert "index.html" in content
            assert len(content.warnings) == 1
        assert sum("missing/*.html" in message for message in caplog.messages) == 1
