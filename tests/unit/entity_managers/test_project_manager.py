##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Tests for the `project_manager.py` module.
"""

from unittest.mock import MagicMock

import pytest

from assortsync.clients.memory_client import InMemoryEntityClient
from assortsync.entity_managers.project_manager import ProjectManager


class TestProjectManager:
    """
    Tests for the `ProjectManager` class.
    """

    @pytest.fixture
    def manager(self, mock_client: MagicMock) -> ProjectManager:
        """
        A `ProjectManager` backed by a mocked client.

        Args:
            mock_client: A mocked `EntityClient`.

        Returns:
            A `ProjectManager` instance.
        """
        return ProjectManager(mock_client)

    def test_ensure_for_season_finds_existing(self, manager: ProjectManager, mock_client: MagicMock):
        """
        Test that the first workspace named after the season with the project type is returned.

        Args:
            manager: A `ProjectManager` backed by a mocked client.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = [
            {"id": "w-1", "name": "FA25", "rootWorkspaceType": "LIBRARY"},
            {"id": "w-2", "name": "SP25", "rootWorkspaceType": "PROJECT"},
            {"id": "w-3", "name": "FA25", "rootWorkspaceType": "PROJECT"},
        ]

        project = manager.ensure_for_season("FA25")

        mock_client.get.assert_called_once_with("workspace")
        mock_client.create.assert_not_called()
        assert project.id == "w-3"

    def test_ensure_for_season_creates_missing(self, manager: ProjectManager, mock_client: MagicMock):
        """
        Test that a project is created when the season has none.

        Args:
            manager: A `ProjectManager` backed by a mocked client.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = []
        mock_client.create.return_value = {"id": "w-1", "name": "FA25", "rootWorkspaceType": "PROJECT"}

        project = manager.ensure_for_season("FA25")

        mock_client.create.assert_called_once_with("workspace", {"name": "FA25", "rootWorkspaceType": "PROJECT"})
        assert project.id == "w-1"

    def test_ensure_for_season_in_memory(self, memory_client: InMemoryEntityClient):
        """
        Test that ensuring a season twice creates a single project.

        Args:
            memory_client: An empty in-memory client.
        """
        manager = ProjectManager(memory_client, root_workspace_type="SEASON")

        first = manager.ensure_for_season("FA25")
        second = manager.ensure_for_season("FA25")

        assert first.id == second.id
        assert first.root_workspace_type == "SEASON"
        assert memory_client.count("project") == 1
