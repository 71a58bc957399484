##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
A walk-through of every supported access pattern against a live store.

Each step uses the data returned by the previous one (e.g. the first
project's id) to build the criteria of the next query. When the data needed
for a step is missing the walk-through logs an error and stops.
"""

import logging
from typing import Dict, List, Optional

from assortsync.access_patterns.criteria import is_supported_criteria
from assortsync.access_patterns.queries import (
    get_assortment_items,
    get_assortments,
    get_items,
    get_project_items,
    get_projects,
)
from assortsync.clients.entity_client import EntityClient, Record


LOG = logging.getLogger("assortsync")

SAMPLE_SIZE = 2


def _first_value(records: List[Record], key: str) -> Optional[str]:
    return records[0].get(key) if records else None


def _first_queryable(items: List[Record], role: str, keys: List[str]) -> Optional[Dict]:
    """
    Build the item criteria for the first item with `role` whose `keys` form a supported shape.

    Args:
        items: The items to pick from.
        role: The item role to look for, e.g. `option`.
        keys: The item keys copied into the criteria alongside `role`.

    Returns:
        The criteria, or None if no item of that role can be queried.
    """
    for item in items:
        if item.get("role") != role:
            continue
        criteria = {"role": role, **{key: item.get(key) for key in keys}}
        if is_supported_criteria("item", criteria):
            return criteria
    return None


def demonstrate_access_patterns(  # pylint: disable=too-many-return-statements,too-many-locals
    client: EntityClient, max_pages: Optional[int] = None
) -> bool:
    """
    Exercise every supported access pattern, logging a sample of each result.

    Item option and variant lookups are only shown when the store holds an
    item with that role.

    Args:
        client: A logged-in entity-store client.
        max_pages: Optional cap on the pages fetched when listing assortments.

    Returns:
        True if every step ran, False if the walk-through stopped early.
    """
    # Projects
    all_projects = get_projects(client, {})
    LOG.info(f"Fetch all projects. Sample of projects: {all_projects[:SAMPLE_SIZE]}")
    project_id = _first_value(all_projects, "id")
    if not project_id:
        LOG.error("No projects found to demonstrate specific project access.")
        return False
    LOG.info(f"Fetch specific project: {get_projects(client, {'id': project_id})}")

    # Assortments
    all_assortments = get_assortments(client, {}, max_pages=max_pages)
    LOG.info(f"Fetch all assortments. Sample of assortments: {all_assortments[:SAMPLE_SIZE]}")
    assortment_id = _first_value(all_assortments, "id")
    if not assortment_id:
        LOG.error("No assortments found to demonstrate specific assortment access.")
        return False
    LOG.info(f"Fetch specific assortment: {get_assortments(client, {'id': assortment_id})}")

    # Items
    all_items = get_items(client, {})
    LOG.info(f"Fetch all items. Sample of items: {all_items[:SAMPLE_SIZE]}")
    item_id = _first_value(all_items, "id")
    if not item_id:
        LOG.error("No items found to demonstrate specific item access.")
        return False
    LOG.info(f"Fetch specific item: {get_items(client, {'id': item_id})}")

    item_family_id = _first_value(all_items, "itemFamilyId")
    if not item_family_id:
        LOG.error("No item family found to demonstrate item family access.")
        return False
    family_items = get_items(client, {"itemFamilyId": item_family_id})
    LOG.info(f"Fetch items for item family: {family_items[:SAMPLE_SIZE]}")

    option_criteria = _first_queryable(all_items, "option", ["itemFamilyId", "optionGroup"])
    if option_criteria:
        options = get_items(client, option_criteria)
        LOG.info(f"Fetch item options for family and group: {options[:SAMPLE_SIZE]}")
    else:
        LOG.info("No item options with a family and a color or size group found; skipping option access.")

    variant_criteria = _first_queryable(all_items, "variant", ["itemFamilyId"])
    if variant_criteria:
        variants = get_items(client, variant_criteria)
        LOG.info(f"Fetch item variants for family: {variants[:SAMPLE_SIZE]}")
    else:
        LOG.info("No item variants with a family found; skipping variant access.")

    # Project items
    all_project_items = get_project_items(client, {})
    LOG.info(f"Fetch all project items. Sample of project items: {all_project_items[:SAMPLE_SIZE]}")
    project_items = get_project_items(client, {"projectId": _first_value(all_project_items, "projectId")})
    LOG.info(f"Fetch all project items for a specific project. Sample: {project_items[:SAMPLE_SIZE]}")

    project_item_id = _first_value(project_items, "id")
    if not project_item_id:
        LOG.error("No project items found to demonstrate specific project item access.")
        return False
    LOG.info(f"Fetch specific project item: {get_project_items(client, {'id': project_item_id})}")

    project_item = project_items[0]
    by_project_and_item = get_project_items(
        client, {"projectId": project_item.get("projectId"), "itemId": project_item.get("itemId")}
    )
    LOG.info(f"Fetch project items for specific item in a project: {by_project_and_item[:1]}")
    by_item = get_project_items(client, {"itemId": project_item.get("itemId")})
    LOG.info(f"Fetch project items for specific item: {by_item[:1]}")

    # Assortment items
    assortment_with_items = None
    for assortment in all_assortments:
        items = get_assortment_items(client, {"assortmentId": assortment.get("id")})
        LOG.info(f"Assortment {assortment.get('id')} has items: {len(items)}")
        if items:
            assortment_with_items = assortment
            break

    if assortment_with_items is None:
        LOG.error("No assortments found with assortment items to demonstrate assortment item access.")
        return False

    assortment_items = get_assortment_items(client, {"assortmentId": assortment_with_items.get("id")})
    LOG.info(f"Fetch assortment items for a specific assortment. Sample: {assortment_items[:SAMPLE_SIZE]}")

    assortment_item_id = _first_value(assortment_items, "id")
    if not assortment_item_id:
        LOG.error("No assortment items found to demonstrate specific assortment item access.")
        return False
    LOG.info(f"Fetch specific assortment item: {get_assortment_items(client, {'id': assortment_item_id})}")

    by_item = get_assortment_items(client, {"itemId": assortment_items[0].get("itemId")})
    LOG.info(f"Fetch assortment items for specific item: {by_item[:1]}")
    return True
