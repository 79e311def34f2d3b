"""
Built-in default token set.

DEFAULT_THEME is a constant passed explicitly into resolve_theme; resolution
copies it and never mutates it. Its categories are read-only.
"""

from theme_config.models.theme import ResolvedTheme

DEFAULT_THEME = ResolvedTheme.from_mapping(
    {
        "colors": {
            "transparent": "transparent",
            "current": "currentColor",
            "black": "#000000",
            "white": "#ffffff",
            "gray": "#6b7280",
            "red": "#ef4444",
            "yellow": "#eab308",
            "green": "#22c55e",
            "blue": "#3b82f6",
            "indigo": "#6366f1",
            "purple": "#a855f7",
            "pink": "#ec4899",
        },
        "fontFamily": {
            "sans": [
                "ui-sans-serif",
                "system-ui",
                "sans-serif",
                "Apple Color Emoji",
                "Segoe UI Emoji",
            ],
            "serif": ["ui-serif", "Georgia", "Cambria", "Times New Roman", "Times", "serif"],
            "mono": [
                "ui-monospace",
                "SFMono-Regular",
                "Menlo",
                "Monaco",
                "Consolas",
                "monospace",
            ],
        },
        "screens": {
            "sm": "640px",
            "md": "768px",
            "lg": "1024px",
            "xl": "1280px",
            "2xl": "1536px",
        },
        "borderRadius": {
            "none": "0px",
            "sm": "0.125rem",
            "DEFAULT": "0.25rem",
            "md": "0.375rem",
            "lg": "0.5rem",
            "full": "9999px",
        },
    }
)
