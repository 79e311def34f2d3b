"""
Config sources - discovery, parsing and schema validation.
"""

from theme_config.config.loader import ConfigLoader, format_field_path, load, parse_record

__all__ = [
    "ConfigLoader",
    "format_field_path",
    "load",
    "parse_record",
]
