##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Tests for the `join_entity_manager.py`, `project_item_manager.py`, and
`assortment_item_manager.py` modules.
"""

from unittest.mock import MagicMock

import pytest

from assortsync.clients.memory_client import InMemoryEntityClient
from assortsync.entity_managers.assortment_item_manager import AssortmentItemManager
from assortsync.entity_managers.project_item_manager import ProjectItemManager
from assortsync.exceptions import EntityNotFoundError


class TestProjectItemManager:
    """
    Tests for the `ProjectItemManager` class.
    """

    @pytest.fixture
    def manager(self, mock_client: MagicMock) -> ProjectItemManager:
        """
        A `ProjectItemManager` backed by a mocked client.

        Args:
            mock_client: A mocked `EntityClient`.

        Returns:
            A `ProjectItemManager` instance.
        """
        return ProjectItemManager(mock_client)

    def test_ensure_returns_existing_link(self, manager: ProjectItemManager, mock_client: MagicMock):
        """
        Test that an existing link is returned as-is with one lookup and no create.

        Args:
            manager: A `ProjectItemManager` backed by a mocked client.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = [
            {"id": "pi-1", "itemId": "i-1", "projectId": "p-1", "status": "ACTIVE"},
            {"id": "pi-2", "itemId": "i-1", "projectId": "p-1"},
        ]

        project_item = manager.ensure("i-1", "p-1")

        mock_client.get.assert_called_once_with("project-item", criteria={"itemId": "i-1", "projectId": "p-1"})
        mock_client.create.assert_not_called()
        assert project_item.id == "pi-1"
        assert project_item.additional_data == {"status": "ACTIVE"}

    def test_ensure_creates_missing_link(self, manager: ProjectItemManager, mock_client: MagicMock):
        """
        Test that a missing link is created with exactly one create.

        Args:
            manager: A `ProjectItemManager` backed by a mocked client.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = []
        mock_client.create.return_value = {"id": "pi-1", "itemId": "i-1", "projectId": "p-1"}

        project_item = manager.ensure("i-1", "p-1")

        mock_client.create.assert_called_once_with("project-item", {"itemId": "i-1", "projectId": "p-1"})
        assert project_item.id == "pi-1"

    def test_upsert_updates_the_link(self, manager: ProjectItemManager, mock_client: MagicMock):
        """
        Test that `upsert` ensures the link and then updates it with the payload.

        Args:
            manager: A `ProjectItemManager` backed by a mocked client.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = [{"id": "pi-1", "itemId": "i-1", "projectId": "p-1"}]
        mock_client.update.return_value = {"id": "pi-1", "itemId": "i-1", "projectId": "p-1", "name": "Tee"}

        project_item = manager.upsert({"id": "ext-id", "name": "Tee"}, "i-1", "p-1")

        mock_client.update.assert_called_once_with("project-item", "pi-1", {"name": "Tee"})
        assert project_item.additional_data == {"name": "Tee"}

    def test_find_without_match(self, manager: ProjectItemManager, mock_client: MagicMock):
        """
        Test that `find` returns `None` when nothing is linked.

        Args:
            manager: A `ProjectItemManager` backed by a mocked client.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = []
        assert manager.find("i-1", "p-1") is None

    def test_ensure_raises_when_create_returns_no_record(self, manager: ProjectItemManager, mock_client: MagicMock):
        """
        Test that a create answering without a record raises `EntityNotFoundError`.

        Args:
            manager: A `ProjectItemManager` backed by a mocked client.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = []
        mock_client.create.return_value = {}

        with pytest.raises(EntityNotFoundError, match="returned no project-item record"):
            manager.ensure("i-1", "p-1")


class TestAssortmentItemManager:
    """
    Tests for the `AssortmentItemManager` class.
    """

    @pytest.fixture
    def manager(self, mock_client: MagicMock) -> AssortmentItemManager:
        """
        An `AssortmentItemManager` backed by a mocked client.

        Args:
            mock_client: A mocked `EntityClient`.

        Returns:
            An `AssortmentItemManager` instance.
        """
        return AssortmentItemManager(mock_client)

    def test_ensure_returns_existing_link(self, manager: AssortmentItemManager, mock_client: MagicMock):
        """
        Test that an existing link is returned with one lookup filtered by both ids and no create.

        Args:
            manager: An `AssortmentItemManager` backed by a mocked client.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = [{"id": "ai-1", "itemId": "i-1", "assortmentId": "a-1"}]

        assortment_item = manager.ensure("i-1", "a-1")

        mock_client.get.assert_called_once_with("assortment-item", criteria={"itemId": "i-1", "assortmentId": "a-1"})
        mock_client.create.assert_not_called()
        assert assortment_item.id == "ai-1"

    def test_ensure_creates_through_assortment_relation(self, manager: AssortmentItemManager, mock_client: MagicMock):
        """
        Test that a missing link is created through the assortment's `items` relation.

        Args:
            manager: An `AssortmentItemManager` backed by a mocked client.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = []
        mock_client.create.return_value = [{"id": "ai-1", "itemId": "i-1", "assortmentId": "a-1"}]

        assortment_item = manager.ensure("i-1", "a-1")

        mock_client.create.assert_called_once_with("assortment", {"itemIds": ["i-1"]}, entity_id="a-1", relation="items")
        assert assortment_item.id == "ai-1"
        assert assortment_item.assortment_id == "a-1"

    def test_ensure_is_idempotent_in_memory(self, memory_client: InMemoryEntityClient):
        """
        Test that ensuring the same link twice leaves one assortment item.

        Args:
            memory_client: An empty in-memory client.
        """
        assortment = memory_client.create("assortment", {"name": "Core Mens"})
        manager = AssortmentItemManager(memory_client)

        first = manager.ensure("i-1", assortment["id"])
        second = manager.ensure("i-1", assortment["id"])

        assert first.id == second.id
        assert memory_client.count("assortment-item") == 1

    @pytest.mark.parametrize("create_response", [[], None, {}])
    def test_upsert_stops_when_create_returns_no_record(
        self, manager: AssortmentItemManager, mock_client: MagicMock, create_response
    ):
        """
        Test that an empty create response raises instead of updating a record with no id.

        Args:
            manager: An `AssortmentItemManager` backed by a mocked client.
            mock_client: A mocked `EntityClient`.
            create_response: What the relation create answers with.
        """
        mock_client.get.return_value = []
        mock_client.create.return_value = create_response

        with pytest.raises(EntityNotFoundError, match="returned no assortment-item record"):
            manager.upsert({"note": "x"}, "i-1", "a-1")

        mock_client.update.assert_not_called()
