##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Assortsync CLI Package.

This package defines the entry point parser for the `assortsync` CLI tool,
one command class per subcommand, and the helpers those commands share.

Subpackages:
    commands: Contains all command implementations for the Assortsync CLI.

Modules:
    argparse_main: Sets up the top-level argument parser and integrates all
        registered CLI subcommands into the `assortsync` CLI interface.
    entity_registry: Maps entity types to the criteria flags of their CLI subcommands.
    utils: Shared helpers for entity subcommands, criteria flags, and
        building a connected entity store.
"""
