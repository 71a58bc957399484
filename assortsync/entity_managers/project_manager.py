##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
`ProjectManager` module for managing projects in the entity store.

A project is a workspace whose root workspace type is `PROJECT`. Integration
syncs keep one project per season.
"""

import logging

from assortsync.data_models import ProjectModel
from assortsync.entity_managers.entity_manager import EntityManager


LOG = logging.getLogger("assortsync")


class ProjectManager(EntityManager[ProjectModel]):
    """
    Manager class for handling project (workspace) records.

    Attributes:
        root_workspace_type (str): The root workspace type that marks a workspace as a project.

    Methods:
        ensure_for_season: Find the project for a season, creating it if needed.
    """

    _entity_name = "workspace"
    _model_class = ProjectModel

    def __init__(self, client, root_workspace_type: str = "PROJECT"):
        """
        Initialize the ProjectManager.

        Args:
            client (clients.entity_client.EntityClient): The entity-store client.
            root_workspace_type: The root workspace type that marks a workspace as a project.
        """
        super().__init__(client)
        self.root_workspace_type: str = root_workspace_type

    def ensure_for_season(self, season: str) -> ProjectModel:
        """
        Find the project named after `season`, creating it if it doesn't exist.

        All workspaces are listed and the first one named `season` with the
        project root workspace type is returned.

        Args:
            season: The season name, e.g. `FA25`.

        Returns:
            The existing or newly created project.
        """
        for project in self.get_all():
            if project.name == season and project.root_workspace_type == self.root_workspace_type:
                LOG.debug(f"Project for season '{season}' already exists as '{project.id}'.")
                return project

        LOG.info(f"No project exists for season '{season}'. Creating one.")
        return self.create(ProjectModel(name=season, root_workspace_type=self.root_workspace_type))
