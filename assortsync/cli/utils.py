##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Utility functions to support Assortsync CLI command handlers.
"""

import logging
from argparse import ArgumentDefaultsHelpFormatter, ArgumentParser, Namespace
from typing import Dict

from assortsync.cli.entity_registry import ENTITY_REGISTRY
from assortsync.config.configfile import initialize_config
from assortsync.entity_store import EntityStore
from assortsync.utils import get_plural_of_entity


LOG = logging.getLogger("assortsync")


def setup_entity_subcommands(subcommand_parser: ArgumentParser, subcommand_name: str) -> Dict[str, ArgumentParser]:
    """
    Dynamically sets up subcommands for each entity type for a given subcommand.

    This function adds both singular (`<entity>`) and plural (`all-<entities>`) variants
    to support direct targeting and criteria-based selection, respectively.

    Args:
        subcommand_parser (ArgumentParser): The parser to which entity subcommands should be added.
        subcommand_name (str): The name of the subcommand being configured (e.g., "get").

    Returns:
        A mapping from subcommand name to the corresponding ArgumentParser instance.
    """
    parser_map = {}

    for entity_key, config in ENTITY_REGISTRY.items():
        identifiers = config["identifiers"]
        ident_help = config["ident_help"].format(verb=subcommand_name)
        plural_name = get_plural_of_entity(entity_key)

        # <entity> command
        singular = subcommand_parser.add_parser(
            entity_key,
            help=f"{subcommand_name.capitalize()} one or more {plural_name} by {identifiers}.",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        singular.add_argument("entity", type=str, nargs="+", help=ident_help)
        parser_map[entity_key] = singular

        # all-<entities> command
        all_name = f"all-{plural_name}"
        all_parser = subcommand_parser.add_parser(
            all_name,
            help=f"{subcommand_name.capitalize()} all {plural_name} (supports criteria).",
            formatter_class=ArgumentDefaultsHelpFormatter,
        )
        for filt in config["filters"]:
            arg_name = filt["name"]
            all_parser.add_argument(
                f"--{arg_name.replace('_', '-')}",
                type=filt["type"],
                choices=filt.get("choices"),
                help=f"Filter by {arg_name.replace('_', ' ')}.",
            )
        parser_map[all_name] = all_parser

    return parser_map


def get_criteria_for_entity(args: Namespace, entity_type: str) -> Dict:
    """
    Extracts criteria flags from parsed CLI input for a specific entity type.

    Args:
        args (Namespace): Parsed command-line arguments.
        entity_type (str): The entity type whose criteria definitions should be used.

    Returns:
        A dictionary of camelCase wire keys to their provided values. Returns an
            empty dictionary if the entity is invalid or has no criteria flags.
    """
    entity_config = ENTITY_REGISTRY.get(entity_type, None)
    if not entity_config:
        LOG.error(f"Invalid entity: '{entity_type}'.")
        return {}

    criteria = {}
    for filt in entity_config["filters"]:
        value = getattr(args, filt["name"], None)
        if value is not None:
            criteria[filt["key"]] = value
    return criteria


def get_entity_store(args: Namespace) -> EntityStore:
    """
    Build the entity store for a CLI command and log it in.

    With `--local` the in-memory client is used and no login is needed.

    Args:
        args (Namespace): Parsed command-line arguments.

    Returns:
        A ready-to-use entity store.

    Raises:
        MissingCredentialsError: If a remote store is used and no credentials are set.
    """
    if getattr(args, "local", False):
        config = initialize_config(local_mode=True)
        return EntityStore(config)

    store = EntityStore()
    return store.connect()
