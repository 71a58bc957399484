##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Tests for the `main.py` module.
"""

from unittest.mock import MagicMock

import pytest
from pytest_mock import MockerFixture

from assortsync import main as main_module


@pytest.fixture
def mock_parser(mocker: MockerFixture) -> MagicMock:
    """
    Replace the main parser and the logging setup with mocks.

    Args:
        mocker: PyTest mocker fixture.

    Returns:
        The mocked parser returned by `build_main_parser`.
    """
    parser = MagicMock()
    mocker.patch.object(main_module, "build_main_parser", return_value=parser)
    mocker.patch.object(main_module, "setup_logging")
    return parser


def test_main_no_args_prints_help(mocker: MockerFixture, mock_parser: MagicMock):
    """
    Test that running with no arguments prints the help message and returns 1.

    Args:
        mocker: PyTest mocker fixture.
        mock_parser: The mocked main parser.
    """
    mocker.patch("sys.argv", ["assortsync"])

    assert main_module.main() == 1
    mock_parser.print_help.assert_called_once()
    mock_parser.parse_args.assert_not_called()


def test_main_success(mocker: MockerFixture, mock_parser: MagicMock):
    """
    Test that a successful command sets up logging, runs, and exits with code 0.

    Args:
        mocker: PyTest mocker fixture.
        mock_parser: The mocked main parser.
    """
    mocker.patch("sys.argv", ["assortsync", "get", "all-items"])
    args = MagicMock(level="debug")
    mock_parser.parse_args.return_value = args

    with pytest.raises(SystemExit) as excinfo:
        main_module.main()

    assert excinfo.value.code is None
    args.func.assert_called_once_with(args)
    main_module.setup_logging.assert_called_once_with(logger=main_module.LOG, log_level="DEBUG", colors=True)


def test_main_failure_exits_with_one(mocker: MockerFixture, mock_parser: MagicMock, caplog: pytest.LogCaptureFixture):
    """
    Test that an exception raised by a command is logged and exits with code 1.

    Args:
        mocker: PyTest mocker fixture.
        mock_parser: The mocked main parser.
        caplog: PyTest fixture to capture log output.
    """
    mocker.patch("sys.argv", ["assortsync", "sync", "sync.yaml"])
    args = MagicMock(level="info")
    args.func.side_effect = RuntimeError("store is down")
    mock_parser.parse_args.return_value = args

    with pytest.raises(SystemExit) as excinfo:
        main_module.main()

    assert excinfo.value.code == 1
    assert "store is down" in caplog.text
