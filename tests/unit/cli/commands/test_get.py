##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Tests for the `get.py` file of the `cli/commands/` folder.
"""

import logging
from unittest.mock import MagicMock

import pytest
from _pytest.capture import CaptureFixture
from pytest_mock import MockerFixture

from assortsync.cli.commands.get import GetCommand
from assortsync.data_models import ItemModel
from tests.fixture_types import FixtureCallable


@pytest.fixture
def patched_store(mocker: MockerFixture, mock_store: MagicMock) -> MagicMock:
    """
    Make `get_entity_store` hand out the mocked store.

    Args:
        mocker: PyTest mocker fixture.
        mock_store: A mocked `EntityStore`.

    Returns:
        The mocked store.
    """
    mocker.patch("assortsync.cli.commands.get.get_entity_store", return_value=mock_store)
    return mock_store


def test_get_all_with_criteria(create_parser: FixtureCallable, patched_store: MagicMock, capsys: CaptureFixture):
    """
    Test that `get all-items` passes the criteria flags to the store and prints each record.

    Args:
        create_parser: A fixture to help create a parser.
        patched_store: A mocked `EntityStore`.
        capsys: PyTest capsys fixture.
    """
    patched_store.get_all.return_value = [ItemModel(id="i-1"), ItemModel(id="i-2")]
    parser = create_parser(GetCommand())
    args = parser.parse_args(["get", "all-items", "--item-family-id", "fam-1", "--role", "variant"])

    args.func(args)

    patched_store.get_all.assert_called_once_with("item", {"itemFamilyId": "fam-1", "role": "variant"})
    output = capsys.readouterr().out
    assert "i-1" in output
    assert "i-2" in output


def test_get_all_join_records(create_parser: FixtureCallable, patched_store: MagicMock):
    """
    Test that hyphenated entity names are singularized correctly.

    Args:
        create_parser: A fixture to help create a parser.
        patched_store: A mocked `EntityStore`.
    """
    patched_store.get_all.return_value = []
    parser = create_parser(GetCommand())
    args = parser.parse_args(["get", "all-assortment-items", "--assortment-id", "a-1"])

    args.func(args)

    patched_store.get_all.assert_called_once_with("assortment-item", {"assortmentId": "a-1"})


def test_get_all_empty_logs_message(
    create_parser: FixtureCallable, patched_store: MagicMock, caplog: pytest.LogCaptureFixture
):
    """
    Test that an empty result logs a message instead of printing.

    Args:
        create_parser: A fixture to help create a parser.
        patched_store: A mocked `EntityStore`.
        caplog: PyTest fixture to capture log output.
    """
    caplog.set_level(logging.INFO)
    patched_store.get_all.return_value = []
    parser = create_parser(GetCommand())
    args = parser.parse_args(["get", "all-projects"])

    args.func(args)

    assert "No projects found in the entity store." in caplog.text


def test_get_by_ids(create_parser: FixtureCallable, patched_store: MagicMock, capsys: CaptureFixture):
    """
    Test that `get item <ids>` fetches every id.

    Args:
        create_parser: A fixture to help create a parser.
        patched_store: A mocked `EntityStore`.
        capsys: PyTest capsys fixture.
    """
    patched_store.get.side_effect = lambda entity_type, entity_id: ItemModel(id=entity_id)
    parser = create_parser(GetCommand())
    args = parser.parse_args(["get", "item", "i-1", "i-2"])

    args.func(args)

    assert [call.args for call in patched_store.get.call_args_list] == [("item", "i-1"), ("item", "i-2")]
    assert "i-2" in capsys.readouterr().out
