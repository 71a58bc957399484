##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Fixtures for files in this `cli/` test directory.
"""

from argparse import ArgumentParser
from unittest.mock import MagicMock

import pytest

from assortsync.cli.commands.command_entry_point import CommandEntryPoint
from assortsync.entity_store import EntityStore
from tests.fixture_types import FixtureCallable


@pytest.fixture
def create_parser() -> FixtureCallable:
    """
    A fixture to help create a parser for any command.

    Returns:
        A function that creates a parser.
    """

    def _create_parser(cmd: CommandEntryPoint) -> ArgumentParser:
        """
        Returns an `ArgumentParser` configured with the `cmd` command and its subcommands.

        Returns:
            Parser with the `cmd` command and its subcommands registered.
        """
        parser = ArgumentParser()
        parser.add_argument("--local", action="store_true")
        subparsers = parser.add_subparsers(dest="main_command")
        cmd.add_parser(subparsers)
        return parser

    return _create_parser


@pytest.fixture
def mock_store() -> MagicMock:
    """
    A mocked `EntityStore` to hand to commands in place of a real one.

    Returns:
        A `MagicMock` with the `EntityStore` spec and mocked managers.
    """
    store = MagicMock(spec=EntityStore)
    store.projects = MagicMock()
    store.assortments = MagicMock()
    store.items = MagicMock()
    store.project_items = MagicMock()
    store.assortment_items = MagicMock()
    store.client = MagicMock()
    store.config = MagicMock()
    return store
