##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
This module provides functionality for locating, loading, and defaulting the
application configuration file.

It houses the `CONFIG` object that's used throughout Assortsync's codebase.
"""
import logging
import os
from typing import Dict, Optional

import yaml

from assortsync.config import Config
from assortsync.config.config_filepaths import APP_FILENAME, ASSORTSYNC_HOME, CONFIG_PATH_FILE
from assortsync.utils import load_yaml


LOG: logging.Logger = logging.getLogger(__name__)

CONFIG: Optional[Config] = None
IS_LOCAL_MODE: bool = False

DEFAULT_API_URL: str = "https://api.vibeiq.com/prod/api"


def set_local_mode(enable: bool = True):
    """
    Sets Assortsync to run in local mode, which uses the in-memory entity
    client and doesn't require a configuration file.

    Args:
        enable (bool): True to enable local mode, False to disable it.
    """
    global IS_LOCAL_MODE  # pylint: disable=global-statement
    IS_LOCAL_MODE = enable
    if enable:
        LOG.info("Running Assortsync in local mode (in-memory entity store, no configuration file required)")


def is_local_mode() -> bool:
    """
    Checks if Assortsync is running in local mode.

    Returns:
        True if running in local mode, False otherwise.
    """
    return IS_LOCAL_MODE


def load_config(filepath: str) -> Dict:
    """
    Reads an Assortsync YAML configuration file and returns its contents as a dictionary.

    Args:
        filepath (str): The path to the YAML configuration file.

    Returns:
        A dictionary containing the contents of the YAML file or None if file doesn't exist.
    """
    if not os.path.isfile(filepath):
        LOG.info(f"No app config file at {filepath}")
        return None
    LOG.info(f"Reading app config from file {filepath}")
    return load_yaml(filepath) or {}


def find_config_file(path: str = None) -> str:
    """
    Locate the Assortsync application configuration file (`app.yaml`).

    If no directory is provided the search order is:
      1. `app.yaml` in the current working directory.
      2. The file named in `CONFIG_PATH_FILE`, if it exists.
      3. `app.yaml` in the `ASSORTSYNC_HOME` directory.

    Args:
        path (str, optional): A specific directory to look for `app.yaml`.

    Returns:
        The full path to the `app.yaml` file if found, otherwise `None`.
    """
    if path is None:
        local_app = os.path.join(os.getcwd(), APP_FILENAME)
        if os.path.isfile(local_app):
            return local_app

        if os.path.isfile(CONFIG_PATH_FILE):
            with open(CONFIG_PATH_FILE, "r") as f:
                config_path = f.read().strip()
            if os.path.isfile(config_path):
                return config_path

        path_app = os.path.join(ASSORTSYNC_HOME, APP_FILENAME)
        if os.path.isfile(path_app):
            return path_app

        return None

    app_path = os.path.join(path, APP_FILENAME)
    if os.path.exists(app_path):
        return app_path

    return None


def get_default_config() -> Dict:
    """
    Creates the default configuration.

    Returns:
        A configuration dictionary with every supported key set.
    """
    return {
        "entity_store": {
            "client": "memory" if is_local_mode() else "http",
            "api_url": DEFAULT_API_URL,
            "timeout": 60,
            "page_size": 100,
            "max_pages": None,
        },
        "sync": {
            "assortment_type": "INTEGRATION",
            "root_workspace_type": "PROJECT",
        },
    }


def load_defaults(config: Dict):
    """
    Fill in every key missing from `config` with its default value.

    Values the user provided are never overwritten, except that local mode
    always forces the in-memory client.

    Args:
        config (Dict): The configuration dictionary to be updated with default values.
    """
    for section, defaults in get_default_config().items():
        if config.get(section) is None:
            config[section] = {}
        for key, value in defaults.items():
            config[section].setdefault(key, value)

    if is_local_mode():
        config["entity_store"]["client"] = "memory"


def get_config(path: Optional[str] = None) -> Dict:
    """
    Loads an Assortsync configuration file and returns a dictionary containing the configuration data.

    Args:
        path (str, optional): The directory path to search for the configuration file.
            If `None`, default search paths are used.

    Returns:
        A dictionary containing all the configuration data.

    Raises:
        ValueError: If the configuration file cannot be found and it's not a local run.
    """
    if is_local_mode():
        LOG.info("Using default configuration (local mode)")
        config = get_default_config()
        load_defaults(config)
        return config

    filepath: Optional[str] = find_config_file(path)
    if filepath is None:
        raise ValueError(
            "Cannot find an assortsync config file! Run 'assortsync config create' and edit the file "
            f"'{os.path.join(ASSORTSYNC_HOME, APP_FILENAME)}'"
        )
    config: Dict = load_config(filepath)
    load_defaults(config)
    return config


def write_default_config(filepath: str) -> str:
    """
    Write the default configuration to `filepath`, creating parent directories.

    Args:
        filepath: Where to write the `app.yaml` file.

    Returns:
        The absolute path that was written.

    Raises:
        FileExistsError: If a file already exists at `filepath`.
    """
    filepath = os.path.abspath(os.path.expanduser(filepath))
    if os.path.exists(filepath):
        raise FileExistsError(f"A configuration file already exists at '{filepath}'.")

    os.makedirs(os.path.dirname(filepath), exist_ok=True)
    with open(filepath, "w") as app_file:
        yaml.safe_dump(get_default_config(), app_file, sort_keys=False)
    LOG.info(f"Wrote default configuration to '{filepath}'.")
    return filepath


def is_debug() -> bool:
    """
    Determines whether the application is running in debug mode.

    Debug mode is on when the environment variable `ASSORTSYNC_DEBUG` is set to `1`.

    Returns:
        True if `ASSORTSYNC_DEBUG` is set to `1` in the environment, otherwise False.
    """
    if "ASSORTSYNC_DEBUG" in os.environ and int(os.environ["ASSORTSYNC_DEBUG"]) == 1:
        return True
    return False


def default_config_info() -> Dict:
    """
    Returns information about Assortsync's default configurations.

    Returns:
        A dictionary containing the following keys:\n
            - `config_file` (str): Path to the configuration file.
            - `is_debug` (bool): Whether debug mode is enabled.
            - `assortsync_home` (str): Path to the Assortsync home directory.
            - `assortsync_home_exists` (bool): True if the home directory exists, otherwise False.
    """
    return {
        "config_file": find_config_file(),
        "is_debug": is_debug(),
        "assortsync_home": ASSORTSYNC_HOME,
        "assortsync_home_exists": os.path.exists(ASSORTSYNC_HOME),
    }


def initialize_config(path: Optional[str] = None, local_mode: bool = False) -> Config:
    """
    Initializes and returns the Assortsync configuration.

    Args:
        path (Optional[str]): Path to look for configuration file
        local_mode (bool): Whether to use local mode (no config file required)

    Returns:
        The initialized configuration object
    """
    if local_mode:
        set_local_mode(True)

    global CONFIG  # pylint: disable=global-statement

    try:
        app_config = get_config(path)
        CONFIG = Config(app_config)
    except ValueError as e:
        LOG.debug(f"Error loading configuration: {e}. Falling back to default configuration.")
        default_config = get_default_config()
        load_defaults(default_config)
        CONFIG = Config(default_config)

    return CONFIG


initialize_config()
