##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Implements the `upsert-item` command for the Assortsync CLI.

The item payload is read from a YAML or JSON file. A file holding a list
upserts each item in order.
"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from assortsync.cli.commands.command_entry_point import CommandEntryPoint
from assortsync.cli.utils import get_entity_store
from assortsync.utils import load_payload_file


LOG = logging.getLogger("assortsync")


class UpsertItemCommand(CommandEntryPoint):
    """
    Handles the `upsert-item` command, which upserts items by federated id.

    Methods:
        add_parser: Adds the `upsert-item` parser.
        process_command: Upserts every item in the payload file and prints the results.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `upsert-item` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the
                command parser will be added.
        """
        parser = subparsers.add_parser(
            "upsert-item",
            help="Create or update items keyed by their federatedId.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument("payload_file", type=str, help="Path to a YAML or JSON file holding an item or a list of items.")

    def process_command(self, args: Namespace):
        """
        Process the `upsert-item` command using the provided CLI arguments.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        payload = load_payload_file(args.payload_file)
        items = payload if isinstance(payload, list) else [payload]
        store = get_entity_store(args)
        for item in items:
            print(store.items.upsert(item))
