##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Integration flows that push items from an external system into a season's
integration assortment.
"""

import logging
from typing import Dict, Iterable, List

from assortsync.data_models import AssortmentItemModel
from assortsync.entity_store import EntityStore


LOG = logging.getLogger("assortsync")


def create_integration_assortment_item(
    store: EntityStore, assortment_item: Dict, project_id: str, assortment_id: str
) -> AssortmentItemModel:
    """
    Push one external item into a project and one of its assortments.

    The item is upserted by its federated id, its project item is upserted
    with the same payload, and the item is then linked to the assortment.

    Args:
        store: A connected entity store.
        assortment_item: The item payload; needs at least `name` and `federatedId`.
        project_id: The id of the project.
        assortment_id: The id of the assortment.

    Returns:
        The assortment item linking the item to the assortment.

    Raises:
        MissingFederatedIdError: If the payload has no `federatedId`.
    """
    item = store.items.upsert(assortment_item)
    store.project_items.upsert(assortment_item, item.id, project_id)
    return store.assortment_items.ensure(item.id, assortment_id)


def sync_assortment_items(
    store: EntityStore, season: str, cfop: str, division: str, items: Iterable[Dict]
) -> List[AssortmentItemModel]:
    """
    Push a batch of external items into the integration assortment of a season.

    The season's project and its `"{cfop} {division}"` assortment are created
    if needed. Items are then processed one at a time in order; the first
    failure stops the sync.

    Args:
        store: A connected entity store.
        season: The season name, used as the project name.
        cfop: The CFOP label of the assortment.
        division: The division label of the assortment.
        items: The item payloads to push.

    Returns:
        The assortment items, in the same order as `items`.
    """
    project = store.projects.ensure_for_season(season)
    assortment = store.assortments.ensure_for_project(project.id, cfop, division)
    LOG.info(f"Syncing items into assortment '{assortment.name}' ({assortment.id}) of project '{project.name}'.")

    assortment_items = []
    for item in items:
        assortment_items.append(create_integration_assortment_item(store, item, project.id, assortment.id))
        LOG.debug(f"Synced item '{item.get('federatedId')}'.")

    LOG.info(f"Synced {len(assortment_items)} items.")
    return assortment_items
