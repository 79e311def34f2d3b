"""
Content scanner - resolves content patterns into the files to scan.

The resolved set is lazy and restartable: every iteration walks the
filesystem again, so two iterations over an unchanged tree yield the same
paths in the same order.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

from theme_config.content.globbing import expand_braces, split_anchor
from theme_config.errors import NoMatchWarning
from theme_config.models.config import ConfigurationRecord

logger = logging.getLogger(__name__)


class ResolvedContentSet:
    """
    Deduplicated files matched by a record's content patterns.

    Paths under the resolution root are yielded relative to it; paths
    outside it (absolute patterns) are yielded as absolute paths.
    """

    def __init__(self, patterns: tuple[str, ...], root: Path):
        """
        Initialize the content set.

        Args:
            patterns: Glob patterns in record order
            root: Directory relative patterns are resolved against
        """
        self.patterns = tuple(patterns)
        self.root = Path(root)
        self._logged: set[str] = set()

    def __iter__(self) -> Iterator[Path]:
        return self._walk(on_miss=self._log_miss)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, Path)):
            return False
        target = Path(path)
        return any(candidate == target for candidate in self)

    def __repr__(self) -> str:
        return f"ResolvedContentSet(patterns={list(self.patterns)!r}, root={str(self.root)!r})"

    @property
    def warnings(self) -> list[NoMatchWarning]:
        """One NoMatchWarning per pattern that matched no files."""
        misses: list[NoMatchWarning] = []
        for _ in self._walk(on_miss=misses.append):
            pass
        for warning in misses:
            self._log_miss(warning)
        return misses

    def as_set(self) -> frozenset[Path]:
        """Materialize the matched paths."""
        return frozenset(self)

    def _walk(self, on_miss: Callable[[NoMatchWarning], None]) -> Iterator[Path]:
        seen: set[Path] = set()
        for pattern in self.patterns:
            matched = False
            for path in self._expand(pattern):
                matched = True
                if path in seen:
                    continue
                seen.add(path)
                yield path
            if not matched:
                on_miss(NoMatchWarning(pattern))

    def _expand(self, pattern: str) -> list[Path]:
        """Files matched by one pattern, sorted for a stable order."""
        found: set[Path] = set()
        for expanded in expand_braces(pattern):
            base, relative = split_anchor(expanded, self.root)
            if not relative or relative == ".":
                continue
            for match in base.glob(relative):
                if match.is_file():
                    found.add(self._relativize(match))
        logger.debug(f"Pattern '{pattern}' matched {len(found)} file(s)")
        return sorted(found)

    def _log_miss(self, warning: NoMatchWarning) -> None:
        # Once per pattern, however often the set is consumed
        if warning.pattern in self._logged:
            return
        self._logged.add(warning.pattern)
        logger.warning(str(warning))

    def _relativize(self, path: Path) -> Path:
        try:
            return path.relative_to(self.root)
        except ValueError:
            return path


def resolve_content_set(record: ConfigurationRecord, cwd: Path | str) -> ResolvedContentSet:
    """
    Resolve a record's content patterns against a directory.

    Args:
        record: Validated configuration record
        cwd: Directory relative patterns are resolved against

    Returns:
        A lazy, restartable set of matched file paths
    """
    return ResolvedContentSet(record.content_patterns, Path(cwd))