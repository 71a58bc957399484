##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Abstract base class for entity-store clients in Assortsync.

This module defines `EntityClient`, which specifies the interface every client
of the remote entity store must implement. The interface mirrors the store
itself: records are addressed by an entity name (e.g. `item`,
`assortment-item`), an optional id, and an optional criteria dict that must
be one of the store's indexed filter shapes.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Union


API_VERSION_V2 = "V2"
"""The API version under which list calls return cursor pages instead of plain lists."""

Record = Dict[str, Any]
Page = Dict[str, Any]


class EntityClient(ABC):
    """
    Abstract base class for a client of the remote entity store.

    Attributes:
        client_name (str): The name of the client implementation (e.g., "http", "memory").

    Methods:
        get_name: Retrieve the name of the client.
        login: Authenticate against the entity store.
        get: Fetch one record, a list of records, or a page of records.
        create: Create a record, or related records under a parent.
        update: Merge changes into an existing record.
    """

    def __init__(self, client_name: str):
        """
        Initialize the `EntityClient` instance.

        Args:
            client_name: The name of the client implementation.
        """
        self.client_name: str = client_name

    def get_name(self) -> str:
        """
        Get the name of the client.

        Returns:
            The name of the client (e.g. http).
        """
        return self.client_name

    @abstractmethod
    def login(self, org_slug: str, email: str, password: str):
        """
        Authenticate against the entity store.

        Args:
            org_slug: The organization identifier.
            email: The email of the user logging in.
            password: The password of the user logging in.
        """
        raise NotImplementedError("Subclasses of `EntityClient` must implement a `login` method.")

    @abstractmethod
    def get(  # pylint: disable=too-many-arguments
        self,
        entity_name: str,
        entity_id: Optional[str] = None,
        criteria: Optional[Dict] = None,
        federated_id: Optional[str] = None,
        next_page_key: Optional[str] = None,
        api_version: Optional[str] = None,
    ) -> Union[Record, List[Record], Page, None]:
        """
        Query the entity store.

        Args:
            entity_name: The entity name, e.g. `item`.
            entity_id: Fetch the single record with this id.
            criteria: Exact-match filter; must be one of the store's indexed shapes.
            federated_id: Fetch the single record with this federated identifier.
            next_page_key: The cursor returned by the previous page.
            api_version: Set to `API_VERSION_V2` to receive cursor pages.

        Returns:
            With `entity_id`, the record. With `federated_id`, the record or `None`.
            With `API_VERSION_V2`, a page `{"results": [...], "nextPageKey": ...}`.
            Otherwise, a list of records.

        Raises:
            EntityNotFoundError: If `entity_id` is given and no such record exists.
        """
        raise NotImplementedError("Subclasses of `EntityClient` must implement a `get` method.")

    @abstractmethod
    def create(
        self,
        entity_name: str,
        payload: Dict,
        entity_id: Optional[str] = None,
        relation: Optional[str] = None,
    ) -> Union[Record, List[Record]]:
        """
        Create a record.

        When `entity_id` and `relation` are both given, related records are
        created under the parent `entity_name`/`entity_id` instead, e.g. the
        `items` relation of an assortment with `{"itemIds": [...]}`.

        Args:
            entity_name: The entity name, e.g. `item`.
            payload: The record to create.
            entity_id: The id of the parent record when creating through a relation.
            relation: The relation of the parent to create records under.

        Returns:
            The created record, or the created related records.
        """
        raise NotImplementedError("Subclasses of `EntityClient` must implement a `create` method.")

    @abstractmethod
    def update(self, entity_name: str, entity_id: str, payload: Dict) -> Record:
        """
        Merge `payload` into an existing record.

        Args:
            entity_name: The entity name, e.g. `item`.
            entity_id: The id of the record to update.
            payload: The changes to apply.

        Returns:
            The updated record.
        """
        raise NotImplementedError("Subclasses of `EntityClient` must implement an `update` method.")
