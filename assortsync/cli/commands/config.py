##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
CLI command for managing the Assortsync configuration file.

- `config show` prints the active configuration and where it came from.
- `config create` writes a default `app.yaml`.
"""

import logging
import os
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace

from tabulate import tabulate

from assortsync.cli.commands.command_entry_point import CommandEntryPoint
from assortsync.config.config_filepaths import APP_FILENAME, ASSORTSYNC_HOME
from assortsync.config.configfile import default_config_info, initialize_config, write_default_config


LOG = logging.getLogger("assortsync")


class ConfigCommand(CommandEntryPoint):
    """
    CLI command group for managing the Assortsync configuration file.

    Attributes:
        default_config_file (str): The default path to the config file (`~/.assortsync/app.yaml`).

    Methods:
        add_parser: Adds the `config` command and its subcommands to the CLI parser.
        process_command: Processes the CLI input and dispatches the appropriate action.
    """

    default_config_file = os.path.join(ASSORTSYNC_HOME, APP_FILENAME)

    def add_parser(self, subparsers: ArgumentParser):
        """
        Add the `config` command parser to the CLI argument parser.

        Parameters:
            subparsers (ArgumentParser): The subparsers object to which the `config`
                command parser will be added.
        """
        config_parser = subparsers.add_parser(
            "config",
            help="Show or create the Assortsync configuration.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        config_parser.set_defaults(func=self.process_command)
        config_subparsers = config_parser.add_subparsers(dest="config_command", required=True)

        config_subparsers.add_parser("show", help="Show the active configuration.")

        config_create_parser = config_subparsers.add_parser("create", help="Create a new configuration file.")
        config_create_parser.add_argument(
            "-o",
            "--output-file",
            dest="config_file",
            type=str,
            default=self.default_config_file,
            help=f"Optional file name for your configuration. Default: {self.default_config_file}",
        )

    def process_command(self, args: Namespace):
        """
        Process the `config` command using the provided CLI arguments.

        Args:
            args: An argparse Namespace containing user arguments.
        """
        if args.config_command == "create":
            write_default_config(args.config_file)
            return

        config = initialize_config(local_mode=getattr(args, "local", False))
        print(tabulate(default_config_info().items(), tablefmt="presto"))
        print()
        print(config)
