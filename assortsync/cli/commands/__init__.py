##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Assortsync CLI Commands Package.

Each module encapsulates the logic and argument parsing for a distinct
Assortsync command, built around the `CommandEntryPoint` interface.

Modules:
    command_entry_point: Defines the abstract base class `CommandEntryPoint` for all CLI commands.
    access_patterns: Implements the `access-patterns` command for listing and exercising filter shapes.
    config: Implements the `config` command for showing and creating configuration files.
    ensure: Implements the `ensure-project` and `ensure-assortment` commands.
    get: Implements the `get` command for reading records from the entity store.
    sync: Implements the `sync` command for pushing items into an integration assortment.
    upsert: Implements the `upsert-item` command for upserting items by federated id.
"""

from assortsync.cli.commands.access_patterns import AccessPatternsCommand
from assortsync.cli.commands.config import ConfigCommand
from assortsync.cli.commands.ensure import EnsureAssortmentCommand, EnsureProjectCommand
from assortsync.cli.commands.get import GetCommand
from assortsync.cli.commands.sync import SyncCommand
from assortsync.cli.commands.upsert import UpsertItemCommand


# Keep these in alphabetical order
ALL_COMMANDS = [
    AccessPatternsCommand(),
    ConfigCommand(),
    EnsureAssortmentCommand(),
    EnsureProjectCommand(),
    GetCommand(),
    SyncCommand(),
    UpsertItemCommand(),
]
