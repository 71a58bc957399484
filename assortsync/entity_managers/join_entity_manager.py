##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
This module defines `JoinEntityManager`, the shared base for managers of join
records that link an item to a parent (a project or an assortment).

Join records are treated as unique per (parent id, item id) but nothing
enforces it: a lookup takes the first match, and a find-then-create across two
processes can produce duplicates.
"""

import logging
from abc import abstractmethod
from typing import Dict, Union

from assortsync.clients.entity_client import Record
from assortsync.entity_managers.entity_manager import EntityManager, M
from assortsync.exceptions import EntityNotFoundError


LOG = logging.getLogger("assortsync")


class JoinEntityManager(EntityManager[M]):
    """
    Base class for managers of item join records.

    Attributes:
        _parent_key: The wire key holding the parent's id (e.g. `projectId`).
            Subclasses must set this.

    Methods:
        find: Look up the join record for an item and a parent.
        ensure: Find the join record for an item and a parent, creating it if needed.
        upsert: Ensure the join record exists, then update it with a payload.
    """

    _parent_key: str = None

    @abstractmethod
    def _create_link(self, item_id: str, parent_id: str) -> Union[Record, list]:
        """
        Issue the store call that creates the join record.

        Args:
            item_id: The id of the item.
            parent_id: The id of the parent.

        Returns:
            The raw response of the create call.
        """
        raise NotImplementedError("Subclasses of `JoinEntityManager` must implement a `_create_link` method.")

    def find(self, item_id: str, parent_id: str) -> Union[M, None]:
        """
        Look up the join record for an item and a parent with one store call.

        Args:
            item_id: The id of the item.
            parent_id: The id of the parent.

        Returns:
            The first matching join record, or None if there is none.
        """
        records = self.client.get(self._entity_name, criteria={"itemId": item_id, self._parent_key: parent_id})
        return self._to_model(records[0]) if records else None

    def ensure(self, item_id: str, parent_id: str) -> M:
        """
        Find the join record for an item and a parent, creating it if needed.

        Exactly one lookup filtered by both ids is made. When it finds a
        record no create is issued and the first record is returned as the
        store sent it; otherwise exactly one create is issued.

        Args:
            item_id: The id of the item.
            parent_id: The id of the parent.

        Returns:
            The existing or newly created join record.

        Raises:
            EntityNotFoundError: If the create answers without a record.
        """
        existing = self.find(item_id, parent_id)
        if existing is not None:
            LOG.debug(f"Item '{item_id}' is already linked to {self._parent_key} '{parent_id}'.")
            return existing

        LOG.info(f"Linking item '{item_id}' to {self._parent_key} '{parent_id}'.")
        created = self._to_model(self._create_link(item_id, parent_id))
        if not created.id:
            raise EntityNotFoundError(
                f"Linking item '{item_id}' to {self._parent_key} '{parent_id}' returned no {self._entity_name} record."
            )
        return created

    def upsert(self, payload: Union[M, Dict], item_id: str, parent_id: str) -> M:
        """
        Ensure the join record for an item and a parent exists, then update it with `payload`.

        Args:
            payload: The data to merge into the join record.
            item_id: The id of the item.
            parent_id: The id of the parent.

        Returns:
            The updated join record.
        """
        entity = self.ensure(item_id, parent_id)
        return self.update(entity.id, payload)
