##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
`AssortmentManager` module for managing assortments in the entity store.

Integration syncs keep one assortment per CFOP and division inside each
season's project.
"""

import logging
from typing import Dict, List, Optional

from assortsync.access_patterns.pagination import fetch_all_pages
from assortsync.clients.entity_client import Record
from assortsync.data_models import AssortmentModel
from assortsync.entity_managers.entity_manager import EntityManager


LOG = logging.getLogger("assortsync")


class AssortmentManager(EntityManager[AssortmentModel]):
    """
    Manager class for handling assortment records.

    Listing every assortment follows the store's page cursor.

    Attributes:
        assortment_type (str): The type tag stamped on assortments this manager creates.
        max_pages (Optional[int]): Cap on the pages fetched when listing every assortment.

    Methods:
        get_for_project: List the assortments under a project.
        ensure_for_project: Find the assortment for a CFOP and division, creating it if needed.
    """

    _entity_name = "assortment"
    _model_class = AssortmentModel

    def __init__(self, client, assortment_type: str = "INTEGRATION", max_pages: Optional[int] = None):
        """
        Initialize the AssortmentManager.

        Args:
            client (clients.entity_client.EntityClient): The entity-store client.
            assortment_type: The type tag stamped on assortments this manager creates.
            max_pages: Cap on the pages fetched when listing every assortment.
        """
        super().__init__(client)
        self.assortment_type: str = assortment_type
        self.max_pages: Optional[int] = max_pages

    def _retrieve(self, criteria: Dict) -> List[Record]:
        if not criteria:
            return fetch_all_pages(self.client, self._entity_name, max_pages=self.max_pages)
        return super()._retrieve(criteria)

    def get_for_project(self, project_id: str) -> List[AssortmentModel]:
        """
        List the assortments whose root workspace is `project_id`.

        Args:
            project_id: The id of the project.

        Returns:
            The assortments under the project.
        """
        return self.get_all({"rootWorkspaceId": project_id})

    def ensure_for_project(self, project_id: str, cfop: str, division: str) -> AssortmentModel:
        """
        Find the assortment named `"{cfop} {division}"` in a project, creating
        it if it doesn't exist.

        Args:
            project_id: The id of the project the assortment lives in.
            cfop: The CFOP label.
            division: The division label.

        Returns:
            The existing or newly created assortment.
        """
        assortment_name = f"{cfop} {division}"
        for assortment in self.get_for_project(project_id):
            if assortment.name == assortment_name and assortment.workspace_id == project_id:
                LOG.debug(f"Assortment '{assortment_name}' already exists as '{assortment.id}'.")
                return assortment

        assortment = self.create(
            AssortmentModel(
                name=assortment_name,
                workspace_id=project_id,
                root_workspace_id=project_id,
                assortment_type=self.assortment_type,
            )
        )
        LOG.info(f"Created new assortment: {assortment.name}")
        return assortment
