##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Implements the `get` command for the Assortsync CLI.

Main Capabilities:
- `get <entity> <ids...>`: Retrieve one or more specific records.
- `get all-<entities> [--criteria flags]`: Retrieve all records of an entity
  type, filtered by the given criteria.
"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace
from typing import Any, List

from assortsync.cli.commands.command_entry_point import CommandEntryPoint
from assortsync.cli.entity_registry import ENTITY_REGISTRY
from assortsync.cli.utils import get_criteria_for_entity, get_entity_store, setup_entity_subcommands
from assortsync.entity_store import EntityStore
from assortsync.utils import get_plural_of_entity, get_singular_of_entity


LOG = logging.getLogger("assortsync")


class GetCommand(CommandEntryPoint):
    """
    Handles the `get` command, which retrieves records from the entity store
    based on entity type, identifiers, and criteria.

    Methods:
        add_parser: Adds the `get` parser and its subcommands.
        process_command: Dispatches the appropriate get operation based on CLI args.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `get` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `get`
                command parser will be added.
        """
        get_parser = subparsers.add_parser(
            "get",
            help="Get records stored in the entity store.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        get_parser.set_defaults(func=self.process_command)
        get_subcommands_parser = get_parser.add_subparsers(dest="get_type", required=True)
        setup_entity_subcommands(get_subcommands_parser, "get")

    def _print_items(self, items: List[Any], empty_message: str):
        """
        Print each item in a list, or log a message if the list is empty.

        Args:
            items (List[Any]): List of items to print.
            empty_message (str): Message to log if the list is empty.
        """
        if items:
            for item in items:
                print(item)
        else:
            LOG.info(empty_message)

    def process_command(self, args: Namespace):
        """
        Process the `get` command using the provided CLI arguments.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        store: EntityStore = get_entity_store(args)
        get_type = args.get_type

        if get_type.startswith("all-"):
            entity_type = get_singular_of_entity(get_type[4:])
            criteria = get_criteria_for_entity(args, entity_type)
            items = store.get_all(entity_type, criteria)
            plural_name = get_plural_of_entity(entity_type, join_delimiter=" ")
            criteria_msg = f" with criteria {criteria}" if criteria else ""
            self._print_items(items, f"No {plural_name}{criteria_msg} found in the entity store.")
        elif get_type in ENTITY_REGISTRY:
            items = [store.get(get_type, entity_id) for entity_id in args.entity]
            plural_name = get_plural_of_entity(get_type, join_delimiter=" ")
            self._print_items(items, f"No {plural_name} found for the given identifiers.")
        else:
            LOG.error(f"Unrecognized get_type: {get_type}")
