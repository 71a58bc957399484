##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Defines the entity registry used for dynamic CLI command generation.

This registry maps entity types (project, assortment, item, project-item,
assortment-item) to the criteria flags their `get all-<entities>` command
accepts. Each entry includes:

- `filters`: The supported criteria flags. `name` is the snake_case flag name
  and `key` the camelCase wire key it sets; `choices` restricts the value.
- `identifiers`: A human-readable description of valid identifiers.
- `ident_help`: The help string template for the identifier argument,
  parameterized with `{verb}`.
"""


ENTITY_REGISTRY = {
    "project": {
        "filters": [],
        "identifiers": "ID",
        "ident_help": "IDs of the projects to {verb}.",
    },
    "assortment": {
        "filters": [
            {"name": "root_workspace_id", "key": "rootWorkspaceId", "type": str},
        ],
        "identifiers": "ID",
        "ident_help": "IDs of the assortments to {verb}.",
    },
    "item": {
        "filters": [
            {"name": "item_family_id", "key": "itemFamilyId", "type": str},
            {"name": "role", "key": "role", "type": str, "choices": ["family", "option", "variant"]},
            {"name": "option_group", "key": "optionGroup", "type": str, "choices": ["color", "size"]},
            {"name": "federated_id", "key": "federatedId", "type": str},
        ],
        "identifiers": "ID",
        "ident_help": "IDs of the items to {verb}.",
    },
    "project-item": {
        "filters": [
            {"name": "project_id", "key": "projectId", "type": str},
            {"name": "item_id", "key": "itemId", "type": str},
        ],
        "identifiers": "ID",
        "ident_help": "IDs of the project items to {verb}.",
    },
    "assortment-item": {
        "filters": [
            {"name": "assortment_id", "key": "assortmentId", "type": str},
            {"name": "item_id", "key": "itemId", "type": str},
        ],
        "identifiers": "ID",
        "ident_help": "IDs of the assortment items to {verb}.",
    },
}
