##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Client factory for selecting and instantiating entity-store clients.

This module defines the `EntityClientFactory` class, which maps client names
and aliases (`http`, `memory`, ...) to `EntityClient` implementations and
builds them from the `entity_store` section of the configuration.
"""

from typing import Any, Dict, Type

from assortsync.abstracts import AssortsyncBaseFactory
from assortsync.clients.entity_client import EntityClient
from assortsync.clients.http_client import HttpEntityClient
from assortsync.clients.memory_client import InMemoryEntityClient
from assortsync.config import Config
from assortsync.exceptions import ClientNotSupportedError


class EntityClientFactory(AssortsyncBaseFactory):
    """
    Factory class for managing and instantiating entity-store clients.

    Attributes:
        _registry (Dict[str, EntityClient]): Maps canonical client names to client classes.
        _aliases (Dict[str, str]): Maps alternate names to canonical client names.

    Methods:
        register: Register a new client class and optional aliases.
        list_available: Return a list of supported client names.
        create: Instantiate a client class by name or alias.
        create_from_config: Instantiate the client described by a configuration.
        get_component_info: Return metadata about a registered client.
    """

    def _register_builtins(self):
        """
        Register built-in client implementations.
        """
        self.register("http", HttpEntityClient, aliases=["https", "vibeiq"])
        self.register("memory", InMemoryEntityClient, aliases=["local", "in-memory"])

    def _validate_component(self, component_class: Any):
        """
        Ensure registered component is a subclass of EntityClient.

        Args:
            component_class: The class to validate.

        Raises:
            TypeError: If the component does not subclass EntityClient.
        """
        if not issubclass(component_class, EntityClient):
            raise TypeError(f"{component_class} must inherit from EntityClient")

    def _entry_point_group(self) -> str:
        """
        Entry point group used for discovering client plugins.

        Returns:
            The entry point namespace for Assortsync client plugins.
        """
        return "assortsync.clients"

    def _raise_component_error_class(self, msg: str) -> Type[Exception]:
        """
        Raise an appropriate exception for unsupported clients.

        Args:
            msg: The message to add to the error being raised.

        Raises:
            ClientNotSupportedError: Always.
        """
        raise ClientNotSupportedError(msg)

    def create_from_config(self, config: Config) -> EntityClient:
        """
        Instantiate the client named in the `entity_store` section of `config`.

        Args:
            config: The application configuration.

        Returns:
            The configured client, not yet logged in.
        """
        store_config = config.entity_store
        client_name = store_config.client
        canonical_name = self._aliases.get(client_name, client_name)

        kwargs: Dict[str, Any] = {}
        if canonical_name == "http":
            kwargs = {
                "api_url": store_config.api_url,
                "timeout": store_config.timeout,
            }
        elif canonical_name == "memory":
            kwargs = {"page_size": store_config.page_size}

        return self.create(client_name, kwargs)


client_factory = EntityClientFactory()
