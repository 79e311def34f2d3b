"""
Config loader - discovers, reads and validates configuration sources.

Sources are YAML documents (JSON is accepted as a YAML subset). The document
is validated into a ConfigurationRecord immediately so shape problems
surface at load time with the offending field named.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from theme_config.constants import CONFIG_FILENAMES, ErrorMessages
from theme_config.errors import ConfigNotFoundError, MalformedConfigError, SchemaViolationError
from theme_config.models.config import NATIVE_FIELD_PATHS, ConfigurationRecord, is_native_layout

logger = logging.getLogger(__name__)

ROOT_FIELD = "<root>"


class ConfigLoader:
    """
    Discovers and loads configuration records.

    Config files are looked up in a project directory by the candidate
    names in CONFIG_FILENAMES; the first one present wins.
    """

    def __init__(self, filenames: tuple[str, ...] = CONFIG_FILENAMES):
        """
        Initialize the loader.

        Args:
            filenames: Candidate config file names, in priority order
        """
        self.filenames = filenames

    def find(self, cwd: Path) -> Path | None:
        """
        Find the config file for a project directory.

        Args:
            cwd: Project directory

        Returns:
            Path to the first candidate present, or None
        """
        for name in self.filenames:
            candidate = Path(cwd) / name
            if candidate.is_file():
                logger.debug(f"Found config file {candidate}")
                return candidate
        return None

    def load(self, path: Path | str) -> ConfigurationRecord:
        """
        Read and validate a config file.

        Args:
            path: Path to a YAML or JSON config file

        Returns:
            The validated record

        Raises:
            ConfigNotFoundError: The file does not exist
            MalformedConfigError: The file is not valid YAML/JSON or UTF-8
            SchemaViolationError: The document has the wrong shape
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigNotFoundError(path)

        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedConfigError(
                ErrorMessages.UNREADABLE.format(path=path, detail=exc), path=path
            ) from exc

        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise MalformedConfigError(
                ErrorMessages.INVALID_SYNTAX.format(path=path, detail=_first_line(exc)),
                path=path,
            ) from exc

        record = parse_record(data)
        logger.info(
            f"Loaded config {path}: {len(record.content_patterns)} pattern(s), "
            f"{len(record.theme_extensions)} extended category(ies), {len(record.plugins)} plugin(s)"
        )
        return record

    def load_from(self, cwd: Path) -> ConfigurationRecord:
        """Find and load the config file of a project directory."""
        path = self.find(cwd)
        if path is None:
            raise ConfigNotFoundError(Path(cwd) / self.filenames[0])
        return self.load(path)


def parse_record(data: Any) -> ConfigurationRecord:
    """
    Validate already-parsed config data into a record.

    Errors in a generator-native document are reported under the keys the
    author wrote (``content``, ``theme.extend.colors``).

    Args:
        data: Parsed document (must be a mapping)

    Returns:
        The validated record
    """
    if not isinstance(data, Mapping):
        kind = "an empty document" if data is None else type(data).__name__
        raise SchemaViolationError(ROOT_FIELD, ErrorMessages.NOT_A_MAPPING.format(kind=kind))

    try:
        return ConfigurationRecord.model_validate(data)
    except ValidationError as exc:
        errors = exc.errors()
        first = errors[0]
        loc = tuple(first["loc"])
        if is_native_layout(data) and loc and loc[0] in NATIVE_FIELD_PATHS:
            loc = NATIVE_FIELD_PATHS[loc[0]] + loc[1:]
        raise SchemaViolationError(
            format_field_path(loc),
            first["msg"],
            errors=errors,
        ) from exc


def format_field_path(loc: tuple[Any, ...]) -> str:
    """
    Render a pydantic error location as a dotted field path.

    ``("contentPatterns", 1)`` becomes ``contentPatterns[1]``.
    """
    parts: list[str] = []
    for item in loc:
        if isinstance(item, int) and parts:
            parts[-1] = f"{parts[-1]}[{item}]"
        elif item == "[key]":
            continue
        else:
            parts.append(str(item))
    return ".".join(parts) or ROOT_FIELD


def load(path: Path | str) -> ConfigurationRecord:
    """Read and validate a config file with the default loader."""
    return ConfigLoader().load(path)


def _first_line(exc: Exception) -> str:
    return str(exc).strip().splitlines()[0] if str(exc).strip() else type(exc).__name__
