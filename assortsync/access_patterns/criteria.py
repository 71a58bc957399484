##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Registry of the filter shapes the entity store indexes for each entity kind.

This reflects the state of the store's access patterns as of 2025-06-25. A
criteria dict is supported when its keys are exactly the keys of one pattern
and any values the pattern pins down (e.g. `role="variant"`) match.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional

from assortsync.exceptions import UnsupportedCriteriaError


LOG = logging.getLogger("assortsync")


@dataclass(frozen=True)
class AccessPattern:
    """
    One indexed filter shape.

    Attributes:
        keys: The exact set of criteria keys of this shape.
        fixed: Keys whose value is pinned for this shape.
        choices: Keys whose value must be one of a closed set.
        description: A human-readable summary of the shape.
    """

    keys: FrozenSet[str]
    fixed: Dict[str, str] = field(default_factory=dict)
    choices: Dict[str, FrozenSet[str]] = field(default_factory=dict)
    description: str = ""

    def matches(self, criteria: Dict) -> bool:
        """
        Check whether `criteria` has exactly this shape.

        Args:
            criteria: A normalized criteria dict.

        Returns:
            True if the keys match and every pinned or restricted value is allowed.
        """
        if frozenset(criteria) != self.keys:
            return False
        if any(criteria[key] != value for key, value in self.fixed.items()):
            return False
        return all(criteria[key] in allowed for key, allowed in self.choices.items())


def _pattern(*keys: str, description: str, fixed: Dict = None, choices: Dict = None) -> AccessPattern:
    return AccessPattern(frozenset(keys), fixed or {}, choices or {}, description)


_WORKSPACE_PATTERNS = [
    _pattern(description="all"),
    _pattern("id", description="by id"),
]

ACCESS_PATTERNS: Dict[str, List[AccessPattern]] = {
    "project": _WORKSPACE_PATTERNS,
    "workspace": _WORKSPACE_PATTERNS,
    "assortment": [
        _pattern(description="all (paginated)"),
        _pattern("id", description="by id"),
        _pattern("rootWorkspaceId", description="by project"),
    ],
    "item": [
        _pattern(description="all"),
        _pattern("id", description="by id"),
        _pattern(
            "itemFamilyId",
            "role",
            "optionGroup",
            fixed={"role": "option"},
            choices={"optionGroup": frozenset({"color", "size"})},
            description="options of a family in an option group",
        ),
        _pattern("itemFamilyId", "role", fixed={"role": "variant"}, description="variants of a family"),
        _pattern("itemFamilyId", description="by family"),
    ],
    "project-item": [
        _pattern(description="all"),
        _pattern("id", description="by id"),
        _pattern("itemId", description="by item"),
        _pattern("projectId", "itemId", description="by project and item"),
        _pattern("projectId", description="by project"),
    ],
    "assortment-item": [
        _pattern("id", description="by id"),
        _pattern("assortmentId", "itemId", description="by assortment and item"),
        _pattern("assortmentId", description="by assortment"),
        _pattern("itemId", description="by item"),
    ],
}


def normalize_criteria(criteria: Optional[Dict]) -> Dict:
    """
    Drop criteria entries with empty values (`None` or `""`).

    Args:
        criteria: The raw criteria dict, possibly `None`.

    Returns:
        A new dict holding only the populated entries.
    """
    if not criteria:
        return {}
    return {key: value for key, value in criteria.items() if value is not None and value != ""}


def get_access_patterns(entity_name: str) -> List[AccessPattern]:
    """
    Get the indexed filter shapes for an entity kind.

    Args:
        entity_name: The entity name as used on the wire.

    Returns:
        The list of supported access patterns.

    Raises:
        UnsupportedCriteriaError: If the entity kind has no documented access patterns.
    """
    try:
        return ACCESS_PATTERNS[entity_name]
    except KeyError as exc:
        raise UnsupportedCriteriaError(f"No access patterns are documented for entity '{entity_name}'.") from exc


def is_supported_criteria(entity_name: str, criteria: Optional[Dict]) -> bool:
    """
    Check whether the store can answer `criteria` for `entity_name` directly.

    Args:
        entity_name: The entity name as used on the wire.
        criteria: The criteria dict to check.

    Returns:
        True if the criteria match one of the entity's access patterns.
    """
    normalized = normalize_criteria(criteria)
    return any(pattern.matches(normalized) for pattern in ACCESS_PATTERNS.get(entity_name, []))


def validate_criteria(entity_name: str, criteria: Optional[Dict]) -> Dict:
    """
    Validate `criteria` against the entity's access patterns.

    Args:
        entity_name: The entity name as used on the wire.
        criteria: The criteria dict to validate.

    Returns:
        The normalized criteria.

    Raises:
        UnsupportedCriteriaError: If the criteria don't match any access pattern.
    """
    normalized = normalize_criteria(criteria)
    patterns = get_access_patterns(entity_name)
    if not any(pattern.matches(normalized) for pattern in patterns):
        supported = "; ".join(describe_pattern(pattern) for pattern in patterns)
        raise UnsupportedCriteriaError(
            f"Unsupported criteria for {entity_name}: {sorted(normalized)}. Supported shapes: {supported}."
        )
    return normalized


def describe_pattern(pattern: AccessPattern) -> str:
    """
    Render an access pattern as a short string, e.g. `{itemFamilyId, role=variant}`.

    Args:
        pattern: The pattern to render.

    Returns:
        A string describing the pattern's keys and pinned values.
    """
    parts = []
    for key in sorted(pattern.keys):
        if key in pattern.fixed:
            parts.append(f"{key}={pattern.fixed[key]}")
        elif key in pattern.choices:
            parts.append(f"{key}={'|'.join(sorted(pattern.choices[key]))}")
        else:
            parts.append(key)
    return "{" + ", ".join(parts) + "}"
