##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
This module contains pytest fixtures to be used throughout the entire test suite.
"""
import os
from glob import glob

import pytest

from assortsync.config import configfile
from assortsync.config.credentials import ENV_VARS
from tests.fixture_types import FixtureModification


# pylint: disable=redefined-outer-name


#######################################
# Loading in Module Specific Fixtures #
#######################################

fixture_glob = os.path.join("tests", "fixtures", "**", "*.py")
pytest_plugins = [
    fixture_file.replace(os.sep, ".").replace(".py", "")
    for fixture_file in glob(fixture_glob, recursive=True)
    if not fixture_file.endswith("__init__.py")
]


#######################################
######### Fixture Definitions #########
#######################################


@pytest.fixture(autouse=True)
def reset_local_mode() -> FixtureModification:
    """
    Restore the global local-mode flag and `CONFIG` object after every test
    so that tests enabling `--local` don't leak into each other.
    """
    original_mode = configfile.IS_LOCAL_MODE
    original_config = configfile.CONFIG
    yield
    configfile.IS_LOCAL_MODE = original_mode
    configfile.CONFIG = original_config


@pytest.fixture
def clear_credentials_env(monkeypatch: pytest.MonkeyPatch) -> FixtureModification:
    """
    Remove the entity store credential variables from the environment.

    Args:
        monkeypatch: Built-in fixture for modifying the environment.
    """
    for env_var in ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)


@pytest.fixture
def credentials_env(monkeypatch: pytest.MonkeyPatch) -> FixtureModification:
    """
    Set the entity store credential variables in the environment.

    Args:
        monkeypatch: Built-in fixture for modifying the environment.
    """
    monkeypatch.setenv("CONTRAIL_ORG_SLUG", "test-org")
    monkeypatch.setenv("CONTRAIL_EMAIL", "tester@example.com")
    monkeypatch.setenv("CONTRAIL_PASSWORD", "hunter2")
