##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
One query function per entity kind.

Each function looks at the criteria it's given and forwards the single
supported filter shape they match, checking the most selective shape first:
an `id` lookup, then the most specific key combination, then single keys,
then the unfiltered listing. An `id` lookup returns the record itself; every
other shape returns a list of records.
"""

import logging
from typing import Dict, List, Optional, Union

from assortsync.access_patterns.criteria import normalize_criteria, validate_criteria
from assortsync.access_patterns.pagination import fetch_all_pages
from assortsync.clients.entity_client import EntityClient, Record
from assortsync.exceptions import UnsupportedCriteriaError


LOG = logging.getLogger("assortsync")

QueryResult = Union[Record, List[Record]]


def _get_filtered(client: EntityClient, entity_name: str, criteria: Dict) -> List[Record]:
    criteria = validate_criteria(entity_name, criteria)
    LOG.debug(f"Querying {entity_name} with criteria {criteria}.")
    if not criteria:
        return client.get(entity_name)
    return client.get(entity_name, criteria=criteria)


def get_projects(client: EntityClient, criteria: Optional[Dict] = None) -> QueryResult:
    """
    Query projects by `{id}` or list them all with `{}`.

    Args:
        client: The entity-store client to query.
        criteria: The criteria to dispatch.

    Returns:
        The project for an `id` lookup, otherwise a list of projects.
    """
    criteria = normalize_criteria(criteria)
    if criteria.get("id"):
        return client.get("project", entity_id=criteria["id"])
    return _get_filtered(client, "project", {})


def get_assortments(
    client: EntityClient, criteria: Optional[Dict] = None, max_pages: Optional[int] = None
) -> QueryResult:
    """
    Query assortments by `{id}`, by project with `{rootWorkspaceId}`, or list
    them all with `{}`.

    The full listing follows the page cursor until the store returns an empty page.

    Args:
        client: The entity-store client to query.
        criteria: The criteria to dispatch.
        max_pages: Optional cap on the number of pages fetched for the full listing.

    Returns:
        The assortment for an `id` lookup, otherwise a list of assortments.
    """
    criteria = normalize_criteria(criteria)
    if criteria.get("id"):
        return client.get("assortment", entity_id=criteria["id"])
    if criteria.get("rootWorkspaceId"):
        return _get_filtered(client, "assortment", {"rootWorkspaceId": criteria["rootWorkspaceId"]})
    return fetch_all_pages(client, "assortment", max_pages=max_pages)


def get_items(client: EntityClient, criteria: Optional[Dict] = None) -> QueryResult:
    """
    Query items by `{id}`, by family, by family variants, or by family options
    in an option group, or list them all with `{}`.

    Args:
        client: The entity-store client to query.
        criteria: The criteria to dispatch.

    Returns:
        The item for an `id` lookup, otherwise a list of items.

    Raises:
        UnsupportedCriteriaError: If options are requested without a valid `optionGroup`.
    """
    criteria = normalize_criteria(criteria)
    if criteria.get("id"):
        return client.get("item", entity_id=criteria["id"])

    family_id = criteria.get("itemFamilyId")
    if not family_id:
        return _get_filtered(client, "item", {})

    role = criteria.get("role")
    if role == "option":
        return _get_filtered(
            client,
            "item",
            {"itemFamilyId": family_id, "role": "option", "optionGroup": criteria.get("optionGroup")},
        )
    if role == "variant":
        return _get_filtered(client, "item", {"itemFamilyId": family_id, "role": "variant"})
    return _get_filtered(client, "item", {"itemFamilyId": family_id})


def get_project_items(client: EntityClient, criteria: Optional[Dict] = None) -> QueryResult:
    """
    Query project items by `{id}`, `{projectId, itemId}`, `{projectId}`, or
    `{itemId}`, or list them all with `{}`.

    Args:
        client: The entity-store client to query.
        criteria: The criteria to dispatch.

    Returns:
        The project item for an `id` lookup, otherwise a list of project items.
    """
    criteria = normalize_criteria(criteria)
    if criteria.get("id"):
        return client.get("project-item", entity_id=criteria["id"])

    project_id = criteria.get("projectId")
    item_id = criteria.get("itemId")
    if project_id and item_id:
        return _get_filtered(client, "project-item", {"projectId": project_id, "itemId": item_id})
    if project_id:
        return _get_filtered(client, "project-item", {"projectId": project_id})
    if item_id:
        return _get_filtered(client, "project-item", {"itemId": item_id})
    return _get_filtered(client, "project-item", {})


def get_assortment_items(client: EntityClient, criteria: Optional[Dict] = None) -> QueryResult:
    """
    Query assortment items by `{id}`, `{assortmentId, itemId}`,
    `{assortmentId}`, or `{itemId}`.

    Assortment items can't be listed without a filter.

    Args:
        client: The entity-store client to query.
        criteria: The criteria to dispatch.

    Returns:
        The assortment item for an `id` lookup, otherwise a list of assortment items.

    Raises:
        UnsupportedCriteriaError: If none of `id`, `assortmentId`, or `itemId` is given.
    """
    criteria = normalize_criteria(criteria)
    if criteria.get("id"):
        return client.get("assortment-item", entity_id=criteria["id"])

    assortment_id = criteria.get("assortmentId")
    item_id = criteria.get("itemId")
    if assortment_id and item_id:
        return _get_filtered(client, "assortment-item", {"assortmentId": assortment_id, "itemId": item_id})
    if assortment_id:
        return _get_filtered(client, "assortment-item", {"assortmentId": assortment_id})
    if item_id:
        return _get_filtered(client, "assortment-item", {"itemId": item_id})
    raise UnsupportedCriteriaError("Unsupported criteria for assortment items")
