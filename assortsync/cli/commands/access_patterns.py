##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Implements the `access-patterns` command for the Assortsync CLI.

Without flags the command prints a table of the filter shapes the entity
store supports. With `--demo` it logs in and walks through every shape
against the configured store.
"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from tabulate import tabulate

from assortsync.access_patterns.criteria import ACCESS_PATTERNS, describe_pattern
from assortsync.access_patterns.demo import demonstrate_access_patterns
from assortsync.cli.commands.command_entry_point import CommandEntryPoint
from assortsync.cli.utils import get_entity_store


LOG = logging.getLogger("assortsync")


class AccessPatternsCommand(CommandEntryPoint):
    """
    Handles the `access-patterns` command.

    Methods:
        add_parser: Adds the `access-patterns` parser.
        process_command: Prints the supported shapes or runs the walk-through.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `access-patterns` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the
                command parser will be added.
        """
        parser = subparsers.add_parser(
            "access-patterns",
            help="List the filter shapes the entity store supports.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument(
            "--entity",
            type=str,
            choices=sorted(ACCESS_PATTERNS),
            default=None,
            help="Only list the shapes of this entity type.",
        )
        parser.add_argument(
            "--demo",
            action="store_true",
            help="Log in and exercise every supported shape against the configured store.",
        )

    def process_command(self, args: Namespace):
        """
        Process the `access-patterns` command using the provided CLI arguments.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        if args.demo:
            store = get_entity_store(args)
            if not demonstrate_access_patterns(store.client, max_pages=store.config.entity_store.max_pages):
                LOG.warning("The access pattern walk-through stopped early.")
            return

        rows = [
            [entity_name, describe_pattern(pattern), pattern.description]
            for entity_name, patterns in ACCESS_PATTERNS.items()
            if args.entity in (None, entity_name)
            for pattern in patterns
        ]
        print(tabulate(rows, headers=["Entity", "Criteria", "Description"]))
