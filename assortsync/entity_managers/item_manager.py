##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
`ItemManager` module for managing item records in the entity store.

Items are upserted by their federated identifier, the external system's
natural key for an item.
"""

import logging
from typing import Dict, Union

from assortsync.data_models import ItemModel
from assortsync.entity_managers.entity_manager import EntityManager
from assortsync.exceptions import MissingFederatedIdError


LOG = logging.getLogger("assortsync")


class ItemManager(EntityManager[ItemModel]):
    """
    Manager class for handling item records.

    Methods:
        upsert: Create or update an item keyed by its federated id.
        get_by_federated_id: Look up an item by its federated id.
    """

    _entity_name = "item"
    _model_class = ItemModel

    def get_by_federated_id(self, federated_id: str) -> Union[ItemModel, None]:
        """
        Look up an item by its federated id.

        Args:
            federated_id: The external system's identifier for the item.

        Returns:
            The matching item, or None if there is no match.
        """
        record = self.client.get(self._entity_name, federated_id=federated_id)
        return self._to_model(record) if record else None

    def upsert(self, item: Union[ItemModel, Dict]) -> ItemModel:
        """
        Create or update an item keyed by its federated id.

        Exactly one lookup is made. If it finds an item, that item is updated
        with `item`; otherwise `item` is created.

        Args:
            item: The item to upsert, as a data model or a wire payload.

        Returns:
            The updated or created item.

        Raises:
            MissingFederatedIdError: If `item` has no federated id. No call
                reaches the store in this case.
        """
        if isinstance(item, dict):
            item = ItemModel.from_payload(item)
        if not item.federated_id:
            raise MissingFederatedIdError()

        existing = self.client.get(self._entity_name, federated_id=item.federated_id)
        if existing:
            LOG.debug(f"Item with federatedId '{item.federated_id}' exists as '{existing['id']}'. Updating it.")
            return self.update(existing["id"], item)

        LOG.debug(f"Item with federatedId '{item.federated_id}' does not exist yet. Creating it.")
        return self.create(item)
