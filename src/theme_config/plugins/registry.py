"""
Plugin registry - resolves plugin identifiers to loadable extensions.

Identifiers are looked up in order:
1. Plugins registered on the registry in code
2. Installed entry points in the ``theme_config.plugins`` group
3. An importable dotted path, ``package.module`` or ``package.module:attr``
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from importlib.metadata import EntryPoint, entry_points
from typing import Any

from theme_config.constants import PLUGIN_ENTRY_POINT_GROUP
from theme_config.errors import PluginResolutionError
from theme_config.models.config import ConfigurationRecord

logger = logging.getLogger(__name__)


class PluginRegistry:
    """
    Resolves plugin handles for a build.

    Each registry owns its registrations; resolution only reads them.
    """

    def __init__(self, entry_point_group: str = PLUGIN_ENTRY_POINT_GROUP):
        """
        Initialize the registry.

        Args:
            entry_point_group: Entry point group scanned for installed plugins
        """
        self.entry_point_group = entry_point_group
        self._registered: dict[str, Any] = {}

    def register(self, identifier: str, plugin: Any) -> None:
        """
        Register a plugin under an identifier.

        Args:
            identifier: Name used in config files
            plugin: The plugin object
        """
        if identifier in self._registered:
            raise ValueError(f"Plugin already registered: {identifier}")
        self._registered[identifier] = plugin

    def unregister(self, identifier: str) -> None:
        """Remove a registered plugin (no-op if absent)."""
        self._registered.pop(identifier, None)

    def list_plugins(self) -> list[str]:
        """List identifiers available without importing anything."""
        names = set(self._registered)
        names.update(ep.name for ep in self._entry_points())
        return sorted(names)

    def resolve(self, handle: str | Callable[..., Any]) -> Any:
        """
        Resolve one plugin handle.

        Args:
            handle: Identifier string or an already-loaded callable

        Returns:
            The loaded plugin object

        Raises:
            PluginResolutionError: The identifier cannot be resolved or loaded
        """
        if not isinstance(handle, str):
            return handle

        if handle in self._registered:
            logger.debug(f"Plugin '{handle}' resolved from registry")
            return self._registered[handle]

        for ep in self._entry_points():
            if ep.name == handle:
                try:
                    plugin = ep.load()
                except Exception as exc:
                    raise PluginResolutionError(handle, detail=str(exc)) from exc
                logger.debug(f"Plugin '{handle}' resolved from entry point {ep.value}")
                return plugin

        return self._import(handle)

    def resolve_all(self, record: ConfigurationRecord) -> tuple[Any, ...]:
        """
        Resolve every plugin of a record, failing on the first miss.

        Args:
            record: Validated configuration record

        Returns:
            Loaded plugins in record order
        """
        plugins = tuple(self.resolve(handle) for handle in record.plugins)
        if plugins:
            logger.info(f"Resolved {len(plugins)} plugin(s)")
        return plugins

    def _entry_points(self) -> list[EntryPoint]:
        return list(entry_points(group=self.entry_point_group))

    def _import(self, identifier: str) -> Any:
        module_name, _, attr = identifier.partition(":")
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            # Only a missing target module means "unresolvable"; a missing
            # dependency inside it is a load failure.
            if exc.name is not None and (
                module_name == exc.name or module_name.startswith(f"{exc.name}.")
            ):
                raise PluginResolutionError(identifier) from exc
            raise PluginResolutionError(identifier, detail=str(exc)) from exc
        except (ImportError, ValueError, TypeError) as exc:
            raise PluginResolutionError(identifier, detail=str(exc)) from exc

        if not attr:
            logger.debug(f"Plugin '{identifier}' resolved as module")
            return module

        target: Any = module
        for part in attr.split("."):
            try:
                target = getattr(target, part)
            except AttributeError as exc:
                raise PluginResolutionError(identifier) from exc
        logger.debug(f"Plugin '{identifier}' resolved as attribute")
        return target


default_registry = PluginRegistry()


def validate_plugins(
    record: ConfigurationRecord,
    registry: PluginRegistry | None = None,
) -> tuple[Any, ...]:
    """
    Confirm every plugin of a record resolves to a loadable extension.

    Args:
        record: Validated configuration record
        registry: Registry to resolve against (module default if omitted)

    Returns:
        Loaded plugins in record order

    Raises:
        PluginResolutionError: Naming the first unresolvable identifier
    """
    return (registry or default_registry).resolve_all(record)
