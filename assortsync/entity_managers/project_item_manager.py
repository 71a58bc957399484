##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
`ProjectItemManager` module for managing the join records that link items to projects.
"""

from assortsync.clients.entity_client import Record
from assortsync.data_models import ProjectItemModel
from assortsync.entity_managers.join_entity_manager import JoinEntityManager


class ProjectItemManager(JoinEntityManager[ProjectItemModel]):
    """
    Manager class for handling project-item records.

    Project items are created directly as `project-item` records.
    """

    _entity_name = "project-item"
    _model_class = ProjectItemModel
    _parent_key = "projectId"

    def _create_link(self, item_id: str, parent_id: str) -> Record:
        return self.client.create(self._entity_name, {"itemId": item_id, "projectId": parent_id})
