##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Module for project-wide utility functions.
"""
import json
import logging
import os
import re
from copy import deepcopy
from types import SimpleNamespace
from typing import Any, Dict

import yaml


LOG = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def load_yaml(filepath: str) -> Dict:
    """
    Safely read a YAML file and return its contents.

    Args:
        filepath: The file path to the YAML file to be read.

    Returns:
        A dict representing the contents of the YAML file.
    """
    with open(filepath, "r") as _file:
        return yaml.safe_load(_file)


def load_payload_file(filepath: str) -> Any:
    """
    Read an entity payload from a JSON or YAML file.

    Files ending in `.json` are parsed as JSON; everything else goes through
    the YAML loader, which also accepts plain JSON.

    Args:
        filepath: The path to the payload file.

    Returns:
        The parsed contents of the file.
    """
    filepath = verify_filepath(filepath)
    if filepath.endswith(".json"):
        with open(filepath, "r") as _file:
            return json.load(_file)
    return load_yaml(filepath)


def verify_filepath(filepath: str) -> str:
    """
    Verify that the given file path is valid and return its absolute form.

    This function checks if the specified `filepath` points to an existing file.
    It expands any user directory shortcuts (e.g., `~`) and environment variables
    in the provided path before verifying its existence. If the file does not exist,
    a ValueError is raised.

    Args:
        filepath: The path of the file to verify.

    Returns:
        The verified absolute file path with expanded environment variables.

    Raises:
        ValueError: If the provided file path does not point to a valid file.
    """
    filepath = os.path.abspath(os.path.expandvars(os.path.expanduser(filepath)))
    if not os.path.isfile(filepath):
        raise ValueError(f"'{filepath}' is not a valid filepath")
    return filepath


def nested_dict_to_namespaces(dic: Dict) -> SimpleNamespace:
    """
    Convert a nested dictionary into a nested SimpleNamespace structure.

    Args:
        dic: The nested dictionary to be converted.

    Returns:
        A SimpleNamespace object representing the nested structure of the input dictionary.

    Raises:
        TypeError: If the input is not a dictionary.
    """

    def recurse(dic):
        if not isinstance(dic, dict):
            return dic
        for key, val in list(dic.items()):
            dic[key] = recurse(val)
        return SimpleNamespace(**dic)

    if not isinstance(dic, dict):
        raise TypeError(f"{dic} is not a dict")

    new_dic = deepcopy(dic)
    return recurse(new_dic)


def nested_namespace_to_dicts(namespaces: SimpleNamespace) -> Dict:
    """
    Convert a nested SimpleNamespace structure into a nested dictionary.

    Args:
        namespaces: The nested SimpleNamespace to be converted.

    Returns:
        A dictionary representing the nested structure of the input
            SimpleNamespace.

    Raises:
        TypeError: If the input is not a SimpleNamespace.
    """

    def recurse(namespaces):
        if not isinstance(namespaces, SimpleNamespace):
            return namespaces
        for key, val in list(namespaces.__dict__.items()):
            setattr(namespaces, key, recurse(val))
        return namespaces.__dict__

    if not isinstance(namespaces, SimpleNamespace):
        raise TypeError(f"{namespaces} is not a SimpleNamespace")

    new_ns = deepcopy(namespaces)
    return recurse(new_ns)


def camel_to_snake(name: str) -> str:
    """
    Convert a camelCase wire key (e.g. `federatedId`) to snake_case (`federated_id`).

    Args:
        name: The camelCase name.

    Returns:
        The snake_case version of `name`.
    """
    return _CAMEL_BOUNDARY.sub("_", name).lower()


def snake_to_camel(name: str) -> str:
    """
    Convert a snake_case attribute name (e.g. `federated_id`) to camelCase (`federatedId`).

    Args:
        name: The snake_case name.

    Returns:
        The camelCase version of `name`.
    """
    first, *rest = name.split("_")
    return first + "".join(part.capitalize() for part in rest)


def get_plural_of_entity(entity_type: str, split_delimiter: str = "-", join_delimiter: str = "-") -> str:
    """
    Pluralize an entity type name, e.g. `assortment-item` -> `assortment-items`.

    Args:
        entity_type: The singular entity type.
        split_delimiter: The delimiter separating words in `entity_type`.
        join_delimiter: The delimiter used to join the words of the result.

    Returns:
        The plural form of the entity type.
    """
    words = entity_type.split(split_delimiter)
    words[-1] = f"{words[-1]}s"
    return join_delimiter.join(words)


def get_singular_of_entity(entity_type: str, split_delimiter: str = "-", join_delimiter: str = "-") -> str:
    """
    Singularize an entity type name, e.g. `project-items` -> `project-item`.

    Args:
        entity_type: The plural entity type.
        split_delimiter: The delimiter separating words in `entity_type`.
        join_delimiter: The delimiter used to join the words of the result.

    Returns:
        The singular form of the entity type.
    """
    words = entity_type.split(split_delimiter)
    if words[-1].endswith("s"):
        words[-1] = words[-1][:-1]
    return join_delimiter.join(words)
