##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Tests for the `config.py` file of the `cli/commands/` folder.
"""

import os
from argparse import _SubParsersAction

import yaml
from _pytest.capture import CaptureFixture
from pytest_mock import MockerFixture

from assortsync.cli.commands.config import ConfigCommand
from tests.fixture_types import FixtureCallable


def test_add_parser_includes_all_subcommands(create_parser: FixtureCallable):
    """
    Verify that the `config` command parser includes the `show` and `create` subcommands.

    Args:
        create_parser: A fixture to help create a parser.
    """
    config_subparser = None
    parser = create_parser(ConfigCommand())
    for action in parser._subparsers._actions:
        if isinstance(action, _SubParsersAction):
            config_subparser = action.choices.get("config")
            if config_subparser:
                break

    assert config_subparser is not None, "Config subparser not found"

    help_text = config_subparser.format_help()
    assert "show" in help_text
    assert "create" in help_text


def test_create_writes_default_config(tmp_path, create_parser: FixtureCallable):
    """
    Test that `config create -o` writes the default configuration.

    Args:
        tmp_path: Built-in fixture providing a temporary directory.
        create_parser: A fixture to help create a parser.
    """
    output_file = os.path.join(tmp_path, "nested", "app.yaml")
    parser = create_parser(ConfigCommand())
    args = parser.parse_args(["config", "create", "-o", output_file])

    args.func(args)

    with open(output_file, "r") as _file:
        written = yaml.safe_load(_file)
    assert written["entity_store"]["client"] == "http"
    assert written["sync"]["assortment_type"] == "INTEGRATION"


def test_create_default_output_file():
    """
    Test that `config create` defaults to `~/.assortsync/app.yaml`.
    """
    assert ConfigCommand.default_config_file == os.path.join(os.path.expanduser("~"), ".assortsync", "app.yaml")


def test_show_prints_config(mocker: MockerFixture, create_parser: FixtureCallable, capsys: CaptureFixture):
    """
    Test that `config show` prints the config file info and the configuration.

    Args:
        mocker: PyTest mocker fixture.
        create_parser: A fixture to help create a parser.
        capsys: PyTest capsys fixture.
    """
    mocker.patch("assortsync.config.configfile.find_config_file", return_value=None)
    parser = create_parser(ConfigCommand())
    args = parser.parse_args(["--local", "config", "show"])

    args.func(args)

    output = capsys.readouterr().out
    assert "assortsync_home" in output
    assert "entity_store:" in output
    assert "'memory'" in output
