##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
The `entity_managers` package contains one manager per entity kind of the
remote entity store.

Each manager converts between wire records and data models and implements
the find-or-create operations for its kind. Every operation is a short,
strictly sequential series of store calls; failures from the client propagate
unchanged.

Modules:
    entity_manager.py: Defines the base class
        [`EntityManager`][entity_managers.entity_manager.EntityManager], with
        shared get/create/update logic and client-side filtering.
    join_entity_manager.py: Shared ensure/upsert logic for item join records.
    item_manager.py: Upserts items by federated id.
    project_manager.py: Finds or creates the project for a season.
    assortment_manager.py: Finds or creates the integration assortment in a project.
    project_item_manager.py: Links items to projects.
    assortment_item_manager.py: Links items to assortments through the assortment's `items` relation.
"""
