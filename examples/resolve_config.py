#!/usr/bin/env python3
"""
Example: Resolving a theme config for a build.

Loads examples/theme.config.yaml, resolves it against a throwaway project
tree and prints what the CSS generator would receive.

Usage:
    python examples/resolve_config.py
"""

import logging
import tempfile
from pathlib import Path

from theme_config import ThemeConfigResolver

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")


def main() -> None:
    """Demonstrate config resolution."""
    config_path = Path(__file__).parent / "theme.config.yaml"

    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        (root / "src" / "components").mkdir(parents=True)
        (root / "src" / "lib.rs").write_text('class: "bg-background"')
        (root / "src" / "components" / "header.rs").write_text('class: "text-cornell-red"')
        (root / "index.html").write_text('<body class="font-fira-sans"></body>')

        resolver = ThemeConfigResolver()
        inputs = resolver.resolve(config_path, cwd=root)

        print("Content files:")
        for path in inputs.content:
            print(f"  {path}")
        print()

        print("Colors:")
        for name, value in inputs.theme.get_category("colors").items():
            print(f"  {name}: {value}")
        print()

        print("Font families:")
        for name, stack in inputs.theme.get_category("fontFamily").items():
            print(f"  {name}: {', '.join(stack)}")
        print()

        if inputs.diagnostics:
            print("Diagnostics:")
            for diagnostic in inputs.diagnostics:
                print(f"  {diagnostic}")


if __name__ == "__main__":
    main()
