##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
This module contains the functionality necessary to interact with everything
stored in the remote entity store.
"""

import logging
from typing import Any, Dict, List, Optional

from assortsync.clients.client_factory import client_factory
from assortsync.clients.entity_client import EntityClient
from assortsync.config import Config
from assortsync.config.credentials import Credentials, get_credentials
from assortsync.entity_managers.assortment_item_manager import AssortmentItemManager
from assortsync.entity_managers.assortment_manager import AssortmentManager
from assortsync.entity_managers.entity_manager import EntityManager
from assortsync.entity_managers.item_manager import ItemManager
from assortsync.entity_managers.project_item_manager import ProjectItemManager
from assortsync.entity_managers.project_manager import ProjectManager
from assortsync.exceptions import EntityManagerNotSupportedError


LOG = logging.getLogger("assortsync")


class EntityStore:
    """
    High-level interface for accessing entity store records.

    This class provides a unified interface to all entity managers in Assortsync.

    Attributes:
        config (config.Config): The configuration the store was built from.
        client (clients.entity_client.EntityClient): The client used by every manager.
        projects (entity_managers.project_manager.ProjectManager): A `ProjectManager` instance.
        assortments (entity_managers.assortment_manager.AssortmentManager): An `AssortmentManager` instance.
        items (entity_managers.item_manager.ItemManager): An `ItemManager` instance.
        project_items (entity_managers.project_item_manager.ProjectItemManager):
            A `ProjectItemManager` instance.
        assortment_items (entity_managers.assortment_item_manager.AssortmentItemManager):
            An `AssortmentItemManager` instance.

    Methods:
        connect: Log the client in to the entity store.
        get_client_type: Retrieve the name of the client in use (e.g. http, memory).
        get: Get a record by entity type and id.
        get_all: Get all records of an entity type matching some criteria.
        list_entity_types: List the entity types this store manages.
    """

    def __init__(self, config: Optional[Config] = None, client: Optional[EntityClient] = None):
        """
        Initialize a new EntityStore instance.

        Args:
            config: The configuration to use. Defaults to the global `CONFIG`.
            client: An existing client to use instead of building one from `config`.
        """
        if config is None:
            from assortsync.config.configfile import CONFIG  # pylint: disable=import-outside-toplevel

            config = CONFIG

        self.config: Config = config
        self.client: EntityClient = client if client is not None else client_factory.create_from_config(config)

        store_config = config.entity_store
        sync_config = config.sync
        self._entity_managers: Dict[str, EntityManager] = {
            "project": ProjectManager(self.client, root_workspace_type=sync_config.root_workspace_type),
            "assortment": AssortmentManager(
                self.client, assortment_type=sync_config.assortment_type, max_pages=store_config.max_pages
            ),
            "item": ItemManager(self.client),
            "project-item": ProjectItemManager(self.client),
            "assortment-item": AssortmentItemManager(self.client),
        }

        for manager in self._entity_managers.values():
            manager.set_store_reference(self)

    @property
    def projects(self) -> ProjectManager:
        """
        Get the project manager.

        Returns:
            A [`ProjectManager`][entity_managers.project_manager.ProjectManager] instance.
        """
        return self._entity_managers["project"]

    @property
    def assortments(self) -> AssortmentManager:
        """
        Get the assortment manager.

        Returns:
            An [`AssortmentManager`][entity_managers.assortment_manager.AssortmentManager] instance.
        """
        return self._entity_managers["assortment"]

    @property
    def items(self) -> ItemManager:
        """
        Get the item manager.

        Returns:
            An [`ItemManager`][entity_managers.item_manager.ItemManager] instance.
        """
        return self._entity_managers["item"]

    @property
    def project_items(self) -> ProjectItemManager:
        """
        Get the project item manager.

        Returns:
            A [`ProjectItemManager`][entity_managers.project_item_manager.ProjectItemManager] instance.
        """
        return self._entity_managers["project-item"]

    @property
    def assortment_items(self) -> AssortmentItemManager:
        """
        Get the assortment item manager.

        Returns:
            An [`AssortmentItemManager`][entity_managers.assortment_item_manager.AssortmentItemManager]
                instance.
        """
        return self._entity_managers["assortment-item"]

    def connect(self, credentials: Optional[Credentials] = None) -> "EntityStore":
        """
        Log the client in to the entity store.

        Args:
            credentials: The credentials to log in with. Defaults to the ones
                resolved from the environment and configuration.

        Returns:
            This store, so calls can be chained.

        Raises:
            MissingCredentialsError: If no credentials are given and they can't be resolved.
        """
        if credentials is None:
            credentials = get_credentials(self.config)
        self.client.login(credentials.org_slug, credentials.email, credentials.password)
        return self

    def get_client_type(self) -> str:
        """
        Retrieve the type of client in use.

        Returns:
            The name of the client (e.g. http, memory).
        """
        return self.client.get_name()

    def list_entity_types(self) -> List[str]:
        """
        List the entity types this store manages.

        Returns:
            The entity type names, e.g. `project-item`.
        """
        return list(self._entity_managers.keys())

    def _validate_entity_type(self, entity_type: str):
        """
        Check to make sure the entity type passed in is supported.

        Args:
            entity_type: The type of entity to validate.

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        if entity_type not in self._entity_managers:
            raise EntityManagerNotSupportedError(f"Entity type not supported: {entity_type}")

    def get(self, entity_type: str, entity_id: str) -> Any:
        """
        Get a record by entity type and id.

        Args:
            entity_type: The type of entity to get (project, assortment, item, project-item, assortment-item).
            entity_id: The id of the record.

        Returns:
            The requested record as a data model.

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        self._validate_entity_type(entity_type)
        return self._entity_managers[entity_type].get(entity_id)

    def get_all(self, entity_type: str, criteria: Optional[Dict] = None) -> List[Any]:
        """
        Get all records of an entity type, optionally filtered by criteria.

        Args:
            entity_type: The type of entities to get (project, assortment, item, project-item, assortment-item).
            criteria: Optional camelCase criteria to filter by.

        Returns:
            A list of the matching records as data models.

        Raises:
            EntityManagerNotSupportedError: If the entity type is not supported.
        """
        self._validate_entity_type(entity_type)
        return self._entity_managers[entity_type].get_all(criteria)
