##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Tests for the `entity_manager.py` module.
"""

from unittest.mock import MagicMock

import pytest

from assortsync.data_models import ItemModel
from assortsync.entity_managers.entity_manager import EntityManager
from assortsync.exceptions import UnsupportedCriteriaError


class DummyItemManager(EntityManager[ItemModel]):
    """A concrete manager over the `item` entity for testing the shared logic."""

    _entity_name = "item"
    _model_class = ItemModel


class DummyAssortmentItemManager(EntityManager[ItemModel]):
    """A concrete manager over an entity that can't be listed unfiltered."""

    _entity_name = "assortment-item"
    _model_class = ItemModel


class TestEntityManager:
    """
    Tests for the shared logic of the `EntityManager` base class.
    """

    @pytest.fixture
    def manager(self, mock_client: MagicMock) -> DummyItemManager:
        """
        A manager over the `item` entity backed by a mocked client.

        Args:
            mock_client: A mocked `EntityClient`.

        Returns:
            A `DummyItemManager` instance.
        """
        return DummyItemManager(mock_client)

    def test_get(self, manager: DummyItemManager, mock_client: MagicMock):
        """
        Test that `get` fetches by id and converts the record to a model.

        Args:
            manager: A manager over the `item` entity.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = {"id": "i-1", "federatedId": "EXT-1", "season": "FA25"}

        item = manager.get("i-1")

        mock_client.get.assert_called_once_with("item", entity_id="i-1")
        assert item.id == "i-1"
        assert item.federated_id == "EXT-1"
        assert item.additional_data == {"season": "FA25"}

    def test_get_all_with_supported_criteria(self, manager: DummyItemManager, mock_client: MagicMock):
        """
        Test that supported criteria go straight to the store.

        Args:
            manager: A manager over the `item` entity.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = [{"id": "i-1"}, {"id": "i-2"}]

        items = manager.get_all({"itemFamilyId": "fam-1"})

        mock_client.get.assert_called_once_with("item", criteria={"itemFamilyId": "fam-1"})
        assert [item.id for item in items] == ["i-1", "i-2"]

    def test_get_all_without_criteria(self, manager: DummyItemManager, mock_client: MagicMock):
        """
        Test that no criteria list every record.

        Args:
            manager: A manager over the `item` entity.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = []
        assert manager.get_all() == []
        mock_client.get.assert_called_once_with("item")

    def test_get_all_emulates_unsupported_criteria(self, manager: DummyItemManager, mock_client: MagicMock):
        """
        Test that unsupported criteria fetch the broadest supported subset and
        filter the rest in memory.

        Args:
            manager: A manager over the `item` entity.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = [
            {"id": "i-1", "itemFamilyId": "fam-1", "name": "Tee"},
            {"id": "i-2", "itemFamilyId": "fam-1", "name": "Hoodie"},
        ]

        items = manager.get_all({"itemFamilyId": "fam-1", "name": "Tee"})

        mock_client.get.assert_called_once_with("item", criteria={"itemFamilyId": "fam-1"})
        assert [item.id for item in items] == ["i-1"]

    def test_get_all_with_list_criteria(self, manager: DummyItemManager, mock_client: MagicMock):
        """
        Test that list-valued criteria match any of their values client-side.

        Args:
            manager: A manager over the `item` entity.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.get.return_value = [
            {"id": "i-1", "role": "option"},
            {"id": "i-2", "role": "variant"},
            {"id": "i-3", "role": "family"},
        ]

        items = manager.get_all({"role": ["option", "variant"]})

        mock_client.get.assert_called_once_with("item")
        assert [item.id for item in items] == ["i-1", "i-2"]

    def test_get_all_without_any_supported_subset(self, mock_client: MagicMock):
        """
        Test that criteria with no supported subset raise `UnsupportedCriteriaError`.

        Args:
            mock_client: A mocked `EntityClient`.
        """
        manager = DummyAssortmentItemManager(mock_client)
        with pytest.raises(UnsupportedCriteriaError):
            manager.get_all({"name": "x"})
        mock_client.get.assert_not_called()

    def test_create_drops_id(self, manager: DummyItemManager, mock_client: MagicMock):
        """
        Test that `create` never sends an `id` and returns the created model.

        Args:
            manager: A manager over the `item` entity.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.create.return_value = {"id": "i-1", "name": "Tee"}

        item = manager.create({"id": "ignored", "name": "Tee"})

        mock_client.create.assert_called_once_with("item", {"name": "Tee"})
        assert item.id == "i-1"

    def test_update(self, manager: DummyItemManager, mock_client: MagicMock):
        """
        Test that `update` sends the model's payload without its id.

        Args:
            manager: A manager over the `item` entity.
            mock_client: A mocked `EntityClient`.
        """
        mock_client.update.return_value = {"id": "i-1", "name": "New"}

        item = manager.update("i-1", ItemModel(id="i-9", name="New"))

        mock_client.update.assert_called_once_with("item", "i-1", {"name": "New"})
        assert item.name == "New"

    def test_to_model_takes_first_of_a_list(self, manager: DummyItemManager):
        """
        Test that relation creates answering with a list use the first record.

        Args:
            manager: A manager over the `item` entity.
        """
        assert manager._to_model([{"id": "i-1"}, {"id": "i-2"}]).id == "i-1"

    @pytest.mark.parametrize(
        "record, filters, expected",
        [
            ({"role": "option"}, {"role": "option"}, True),
            ({"role": "option"}, {"role": "variant"}, False),
            ({"role": "option"}, {"role": ["variant", "option"]}, True),
            ({"role": "family"}, {"role": ["variant", "option"]}, False),
            ({}, {"role": "option"}, False),
        ],
    )
    def test_matches_filters(self, record: dict, filters: dict, expected: bool):
        """
        Test client-side filtering of a single record.

        Args:
            record: The record to check.
            filters: The filters to apply.
            expected: Whether the record should match.
        """
        assert EntityManager._matches_filters(record, filters) is expected

    def test_set_store_reference(self, manager: DummyItemManager):
        """
        Test that the owning store is kept.

        Args:
            manager: A manager over the `item` entity.
        """
        store = MagicMock()
        manager.set_store_reference(store)
        assert manager.store is store
