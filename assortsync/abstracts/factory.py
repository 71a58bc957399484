##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Name-based registry for the swappable parts of Assortsync.

`AssortsyncBaseFactory` keeps a table of implementations keyed by a short
name (e.g. `http`), a table of alternate spellings for those names, and
builds instances on request. Third-party packages can add implementations
by exposing them under the factory's entry point group.
"""

import logging
from abc import ABC, abstractmethod
from importlib.metadata import entry_points
from typing import Any, Dict, List, Type


LOG = logging.getLogger("assortsync")


class AssortsyncBaseFactory(ABC):
    """
    Registry and builder for one family of implementations.

    A concrete factory fills in three hooks: which implementations ship with
    Assortsync, what an acceptable implementation looks like, and which entry
    point group plugins are published under.

    Attributes:
        _registry (Dict[str, Any]): Canonical name -> implementation class.
        _aliases (Dict[str, str]): Alternate name -> canonical name.

    Methods:
        register: Add an implementation under a name and optional aliases.
        list_available: Canonical names of every known implementation.
        create: Build an implementation by name or alias.
        get_component_info: Describe an implementation by name or alias.
    """

    def __init__(self):
        self._registry: Dict[str, Any] = {}
        self._aliases: Dict[str, str] = {}
        self._register_builtins()

    @abstractmethod
    def _register_builtins(self):
        """
        Call `register` for every implementation that ships with Assortsync.
        """
        raise NotImplementedError("Subclasses of `AssortsyncBaseFactory` must implement a `_register_builtins` method.")

    @abstractmethod
    def _validate_component(self, component_class: Any):
        """
        Reject anything that can't serve as an implementation.

        Args:
            component_class: The candidate implementation.

        Raises:
            TypeError: If `component_class` is unacceptable.
        """
        raise NotImplementedError(
            "Subclasses of `AssortsyncBaseFactory` must implement a `_validate_component` method."
        )

    @abstractmethod
    def _entry_point_group(self) -> str:
        """
        Returns:
            The entry point group that plugins for this factory are published under.
        """
        raise NotImplementedError("Subclasses of `AssortsyncBaseFactory` must implement an `_entry_point_group` method.")

    def _raise_component_error_class(self, msg: str) -> Type[Exception]:
        """
        Raise the error for an unknown implementation name. Defaults to `ValueError`.

        Args:
            msg: The error message.
        """
        raise ValueError(msg)

    def _discover_plugins(self):
        """
        Register every implementation published under this factory's entry point group.

        A plugin that fails to load is logged and skipped.
        """
        for plugin in entry_points(group=self._entry_point_group()):
            try:
                self.register(plugin.name, plugin.load())
            except Exception as exc:  # pylint: disable=broad-exception-caught
                LOG.warning(f"Skipping plugin '{plugin.name}' from '{self._entry_point_group()}': {exc}")
            else:
                LOG.info(f"Registered plugin '{plugin.name}' from '{self._entry_point_group()}'.")

    def _canonical_name(self, name: str) -> str:
        return self._aliases.get(name, name)

    def _lookup(self, name: str) -> Any:
        """
        Find the implementation registered under `name` or one of its aliases.

        Plugins are only searched when the name isn't already registered.

        Args:
            name: The name or alias requested by the caller.

        Returns:
            The implementation class.
        """
        canonical_name = self._canonical_name(name)
        if canonical_name not in self._registry:
            self._discover_plugins()

        try:
            return self._registry[canonical_name]
        except KeyError:
            self._raise_component_error_class(
                f"Component '{name}' is not supported. Available components: {', '.join(self._registry)}"
            )

    def register(self, name: str, component_class: Any, aliases: List[str] = None):
        """
        Add an implementation to the registry.

        Args:
            name: The canonical name of the implementation.
            component_class: The implementation class.
            aliases: Alternate names that resolve to `name`.

        Raises:
            TypeError: If `component_class` fails `_validate_component`.
        """
        self._validate_component(component_class)
        self._registry[name] = component_class
        for alias in aliases or []:
            self._aliases[alias] = name
        LOG.debug(f"Registered '{name}' with aliases {aliases or []}.")

    def list_available(self) -> List[str]:
        """
        Returns:
            The canonical names of the built-in and plugin implementations.
        """
        self._discover_plugins()
        return list(self._registry)

    def create(self, component_type: str, config: Dict = None) -> Any:
        """
        Build an implementation by name or alias.

        Args:
            component_type: The name or alias of the implementation.
            config: Keyword arguments passed to the implementation's constructor.

        Returns:
            The new instance.

        Raises:
            ValueError: If the constructor raises.
        """
        component_class = self._lookup(component_type)
        canonical_name = self._canonical_name(component_type)
        try:
            return component_class(**(config or {}))
        except Exception as exc:
            raise ValueError(f"Failed to create component '{canonical_name}': {exc}") from exc

    def get_component_info(self, component_type: str) -> Dict:
        """
        Describe an implementation by name or alias.

        Args:
            component_type: The name or alias of the implementation.

        Returns:
            The canonical name, class name, module, and docstring of the implementation.
        """
        component_class = self._lookup(component_type)
        return {
            "name": self._canonical_name(component_type),
            "class": component_class.__name__,
            "module": component_class.__module__,
            "description": component_class.__doc__ or "No description available",
        }
