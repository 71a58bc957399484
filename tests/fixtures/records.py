##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Fixtures holding sample entity store records.
"""

import pytest

from tests.fixture_types import FixtureDict, FixtureList


@pytest.fixture
def item_payload() -> FixtureDict[str, str]:
    """
    An item payload as an external system would send it.

    Returns:
        A camelCase item payload with a federated id.
    """
    return {"name": "Classic Tee", "federatedId": "EXT-1001", "season": "FA25"}


@pytest.fixture
def item_payloads() -> FixtureList[dict]:
    """
    A small batch of item payloads for sync tests.

    Returns:
        A list of camelCase item payloads.
    """
    return [
        {"name": "Classic Tee", "federatedId": "EXT-1001"},
        {"name": "Hoodie", "federatedId": "EXT-1002"},
        {"name": "Cargo Short", "federatedId": "EXT-1003"},
    ]
