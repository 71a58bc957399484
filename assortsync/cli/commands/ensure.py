##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Implements the `ensure-project` and `ensure-assortment` commands for the Assortsync CLI.
"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from assortsync.cli.commands.command_entry_point import CommandEntryPoint
from assortsync.cli.utils import get_entity_store


LOG = logging.getLogger("assortsync")


class EnsureProjectCommand(CommandEntryPoint):
    """
    Handles the `ensure-project` command, which finds or creates the project for a season.

    Methods:
        add_parser: Adds the `ensure-project` parser.
        process_command: Finds or creates the project and prints it.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `ensure-project` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the
                command parser will be added.
        """
        parser = subparsers.add_parser(
            "ensure-project",
            help="Find the project for a season, creating it if needed.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument("season", type=str, help="The season name, used as the project name.")

    def process_command(self, args: Namespace):
        """
        Process the `ensure-project` command using the provided CLI arguments.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        store = get_entity_store(args)
        print(store.projects.ensure_for_season(args.season))


class EnsureAssortmentCommand(CommandEntryPoint):
    """
    Handles the `ensure-assortment` command, which finds or creates the
    integration assortment for a CFOP and division in a project.

    Methods:
        add_parser: Adds the `ensure-assortment` parser.
        process_command: Finds or creates the assortment and prints it.
    """

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `ensure-assortment` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the
                command parser will be added.
        """
        parser = subparsers.add_parser(
            "ensure-assortment",
            help="Find the integration assortment in a project, creating it if needed.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        parser.set_defaults(func=self.process_command)
        parser.add_argument("project_id", type=str, help="The id of the project.")
        parser.add_argument("cfop", type=str, help="The CFOP label of the assortment.")
        parser.add_argument("division", type=str, help="The division label of the assortment.")

    def process_command(self, args: Namespace):
        """
        Process the `ensure-assortment` command using the provided CLI arguments.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        store = get_entity_store(args)
        print(store.assortments.ensure_for_project(args.project_id, args.cfop, args.division))
