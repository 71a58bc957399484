##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Implements the `sync` command for the Assortsync CLI.

The sync file is YAML or JSON with the keys `season`, `cfop`, `division`,
and `items` (a list of item payloads).
"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from assortsync.cli.commands.command_entry_point import CommandEntryPoint
from assortsync.cli.utils import get_entity_store
from assortsync.integration import sync_assortment_items
from assortsync.utils import load_payload_file


LOG = logging.getLogger("assortsync")

REQUIRED_KEYS = ("season", "cfop", "division", "items")


class SyncCommand(CommandEntryPoint):
    """
    Handles the `sync` command, which pushes a batch of items into a
    season's integration assortment.

    Methods:
        add_parser: Adds the `sync` parser.
        process_command: Runs the sync described by the sync file.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `sync` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the
                command parser will be added.
        """
        parser = subparsers.add_parser(
            "sync",
            help="Push items into the integration assortment of a season.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument(
            "sync_file", type=str, help="Path to a YAML or JSON file with season, cfop, division, and items."
        )

    def process_command(self, args: Namespace):
        """
        Process the `sync` command using the provided CLI arguments.

        Args:
            args: An argparse Namespace containing user arguments.

        Raises:
            ValueError: If the sync file is missing a required key.
        """
        sync_spec = load_payload_file(args.sync_file) or {}
        missing = [key for key in REQUIRED_KEYS if key not in sync_spec]
        if missing:
            raise ValueError(f"The sync file '{args.sync_file}' is missing required keys: {', '.join(missing)}")

        store = get_entity_store(args)
        assortment_items = sync_assortment_items(
            store, sync_spec["season"], sync_spec["cfop"], sync_spec["division"], sync_spec["items"] or []
        )
        for assortment_item in assortment_items:
            print(assortment_item)
