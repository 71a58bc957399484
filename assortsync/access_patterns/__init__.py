##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
The `access_patterns` package documents and implements the fixed set of
query shapes the entity store supports.

The entity store is backed by a managed key-value database, so every entity
kind can only be filtered by the handful of key combinations that are indexed.
Ad-hoc predicates are not supported by the store; they have to be emulated by
fetching a broader set and filtering client-side, or by making the property
searchable (for searchable kinds such as items) through the store's admin
console.

Modules:
    criteria.py: The `ACCESS_PATTERNS` registry and criteria validation.
    pagination.py: The cursor-following `fetch_all_pages` helper.
    queries.py: One query function per entity kind, dispatching criteria to
        the supported shape they match.
    demo.py: A walk-through that exercises every supported shape against a live store.
"""
