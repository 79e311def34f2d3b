"""
Glob helpers - brace expansion and pattern normalization.

pathlib globbing understands ``*``, ``?``, ``[...]`` and ``**`` but not
``{a,b}`` alternation, so braces are expanded into separate patterns first.
"""

from __future__ import annotations

from pathlib import Path, PurePath


def expand_braces(pattern: str) -> list[str]:
    """
    Expand ``{a,b}`` alternation into plain glob patterns.

    Nested braces are supported. A brace group without a top-level comma,
    or an unbalanced brace, is kept literally.

    Args:
        pattern: Glob pattern, e.g. ``src/**/*.{html,rs}``

    Returns:
        Expanded patterns in declaration order, without duplicates
    """
    start = _find_group(pattern)
    if start is None:
        return [pattern]

    open_idx, close_idx, options = start
    prefix = pattern[:open_idx]
    suffix = pattern[close_idx + 1 :]

    expanded: list[str] = []
    for option in options:
        for item in expand_braces(prefix + option + suffix):
            if item not in expanded:
                expanded.append(item)
    return expanded


def _find_group(pattern: str) -> tuple[int, int, list[str]] | None:
    """Locate the first expandable brace group and split its options."""
    search_from = 0
    while True:
        open_idx = pattern.find("{", search_from)
        if open_idx < 0:
            return None

        depth = 0
        options: list[str] = []
        segment_start = open_idx + 1
        for idx in range(open_idx, len(pattern)):
            char = pattern[idx]
            if char == "{":
                depth += 1
            elif char == "}":
                depth -= 1
                if depth == 0:
                    options.append(pattern[segment_start:idx])
                    if len(options) > 1:
                        return open_idx, idx, options
                    break
            elif char == "," and depth == 1:
                options.append(pattern[segment_start:idx])
                segment_start = idx + 1
        else:
            # Unbalanced: nothing further can expand
            return None

        # Single-option group stays literal; look for the next one
        search_from = open_idx + 1


def split_anchor(pattern: str, root: Path) -> tuple[Path, str]:
    """
    Split a pattern into the directory to glob from and the relative part.

    Relative patterns glob from ``root`` (a leading ``./`` is dropped);
    absolute patterns glob from their filesystem anchor. A trailing ``**``
    means every file below that directory, as ``**/*``.
    """
    pure = PurePath(pattern)
    if pure.is_absolute():
        return Path(pure.anchor), _expand_trailing_globstar(str(pure.relative_to(pure.anchor)))

    while pattern.startswith("./"):
        pattern = pattern[2:]
    return root, _expand_trailing_globstar(pattern)


def _expand_trailing_globstar(relative: str) -> str:
    # pathlib before 3.13 matches only directories for a trailing "**"
    if relative == "**" or relative.endswith("/**"):
        return f"{relative}/*"
    return relative
