##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
`AssortmentItemManager` module for managing the join records that link items to assortments.
"""

from typing import List

from assortsync.clients.entity_client import Record
from assortsync.data_models import AssortmentItemModel
from assortsync.entity_managers.join_entity_manager import JoinEntityManager


class AssortmentItemManager(JoinEntityManager[AssortmentItemModel]):
    """
    Manager class for handling assortment-item records.

    Assortment items are not created directly: items are added through the
    parent assortment's `items` relation, and the store creates the
    assortment-item records.
    """

    _entity_name = "assortment-item"
    _model_class = AssortmentItemModel
    _parent_key = "assortmentId"

    def _create_link(self, item_id: str, parent_id: str) -> List[Record]:
        return self.client.create("assortment", {"itemIds": [item_id]}, entity_id=parent_id, relation="items")
