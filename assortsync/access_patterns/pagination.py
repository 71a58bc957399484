##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Cursor pagination over the entity store's V2 list endpoint.
"""

import logging
from typing import Dict, List, Optional

from assortsync.clients.entity_client import API_VERSION_V2, EntityClient, Record


LOG = logging.getLogger("assortsync")


def fetch_all_pages(
    client: EntityClient,
    entity_name: str,
    criteria: Optional[Dict] = None,
    max_pages: Optional[int] = None,
) -> List[Record]:
    """
    Fetch every record of an entity kind by following the store's page cursor.

    Each call echoes the `nextPageKey` returned by the previous one. The loop
    stops at the first call that returns an empty page, or after a non-empty
    page that comes back without a cursor.

    Args:
        client: The entity-store client to query.
        entity_name: The entity name, e.g. `assortment`.
        criteria: Optional criteria applied to every page.
        max_pages: Stop after this many non-empty pages. `None` means no limit.

    Returns:
        The records of all pages concatenated in call order.
    """
    records: List[Record] = []
    next_page_key: Optional[str] = None
    pages = 0

    while True:
        response = client.get(
            entity_name,
            criteria=criteria,
            next_page_key=next_page_key,
            api_version=API_VERSION_V2,
        )
        next_page_key = response.get("nextPageKey")
        results = response.get("results") or []

        if not results:
            break

        records.extend(results)
        pages += 1
        LOG.debug(f"Fetched page {pages} of {entity_name} ({len(results)} records).")

        if next_page_key is None:
            LOG.warning(f"Page {pages} of {entity_name} came back without a nextPageKey; stopping pagination.")
            break

        if max_pages is not None and pages >= max_pages:
            LOG.warning(f"Stopped paginating {entity_name} after {max_pages} pages.")
            break

    LOG.debug(f"Fetched {len(records)} {entity_name} records across {pages} pages.")
    return records
