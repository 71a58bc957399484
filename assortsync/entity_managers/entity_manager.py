##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
This module defines the base class `EntityManager`, which provides a generic
framework for reading and writing one entity kind of the remote entity store.

`EntityManager` is subclassed per entity kind (items, projects, join records,
...). It converts between wire records and data models and emulates filters
the store can't answer by fetching a broader set and filtering client-side.
"""

import logging
from abc import ABC
from itertools import combinations
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar, Union

from assortsync.access_patterns.criteria import is_supported_criteria, normalize_criteria
from assortsync.clients.entity_client import EntityClient, Record
from assortsync.data_models import BaseDataModel
from assortsync.exceptions import UnsupportedCriteriaError


M = TypeVar("M", bound=BaseDataModel)

LOG = logging.getLogger("assortsync")


class EntityManager(Generic[M], ABC):
    """
    Base class for managing one entity kind of the remote entity store.

    Generic Parameters:
        M (BaseDataModel): The data model class corresponding to the entity.

    Attributes:
        client: The entity-store client used to read and write records.
        store: A reference to the `EntityStore` this manager belongs to, if any.
        _entity_name: The entity name on the wire. Subclasses must set this.
        _model_class: The data model class for the entity. Subclasses must set this.

    Methods:
        get: Retrieve a single record by its id.
        get_all: Retrieve all records matching some criteria.
        create: Create a new record from a data model.
        update: Merge changes into an existing record.
        set_store_reference: Set a reference to the owning `EntityStore`.
    """

    _entity_name: str = None
    _model_class: Type[M] = None

    def __init__(self, client: EntityClient):
        """
        Initialize the EntityManager with a client.

        Args:
            client: The entity-store client used to read and write records.
        """
        self.client: EntityClient = client
        self.store = None

    def _to_model(self, record: Union[Record, List[Record]]) -> M:
        """
        Convert a wire record into this manager's data model.

        Relation creates answer with a list of records; the first one is used.

        Args:
            record: A record, or a list of records, returned by the store.

        Returns:
            The data model built from the record.
        """
        if isinstance(record, list):
            record = record[0] if record else None
        return self._model_class.from_payload(record or {})

    def _to_payload(self, data: Union[M, Dict], include_id: bool = False) -> Dict:
        if isinstance(data, BaseDataModel):
            return data.to_payload(include_id=include_id)
        payload = dict(data)
        if not include_id:
            payload.pop("id", None)
        return payload

    def _retrieve(self, criteria: Dict) -> List[Record]:
        """
        Fetch records for a criteria dict the store supports.

        Args:
            criteria: A supported, normalized criteria dict.

        Returns:
            The records returned by the store.
        """
        if not criteria:
            return self.client.get(self._entity_name)
        return self.client.get(self._entity_name, criteria=criteria)

    def _broadest_supported_subset(self, criteria: Dict) -> Dict:
        """
        Find the largest subset of `criteria` the store can answer directly.

        Args:
            criteria: A normalized criteria dict the store doesn't support as-is.

        Returns:
            The supported subset.

        Raises:
            UnsupportedCriteriaError: If no subset of the criteria is supported.
        """
        keys = sorted(criteria)
        for size in range(len(keys), -1, -1):
            for subset in combinations(keys, size):
                candidate = {key: criteria[key] for key in subset}
                if is_supported_criteria(self._entity_name, candidate):
                    return candidate
        raise UnsupportedCriteriaError(
            f"Unsupported criteria for {self._entity_name}: {keys}. No supported shape can narrow this query."
        )

    @staticmethod
    def _matches_filters(record: Record, filters: Dict) -> bool:
        """
        Determines whether a wire record matches all provided filter criteria.

        For list filters the record matches if its value is any of the expected values.

        Args:
            record: The record to check against the filters.
            filters: A dictionary of camelCase wire keys and expected values.

        Returns:
            True if the record matches all filter conditions, False otherwise.
        """
        for key, expected in filters.items():
            actual = record.get(key)
            if isinstance(expected, list):
                if actual not in expected:
                    return False
            elif actual != expected:
                return False
        return True

    def get(self, entity_id: str) -> M:
        """
        Retrieve a single record by its id.

        Args:
            entity_id: The opaque id of the record.

        Returns:
            The data model for the record.

        Raises:
            EntityNotFoundError: If no record exists with this id.
        """
        LOG.debug(f"Retrieving {self._entity_name} '{entity_id}'.")
        return self._to_model(self.client.get(self._entity_name, entity_id=entity_id))

    def get_all(self, criteria: Optional[Dict] = None) -> List[M]:
        """
        Retrieve all records of this kind, optionally filtered by criteria.

        Criteria matching one of the store's access patterns are sent to the
        store. Any other criteria are emulated by fetching the broadest
        supported subset and filtering the result in memory.

        Args:
            criteria: A dictionary of camelCase wire keys and expected values.

        Returns:
            A list of data models for the matching records.
        """
        criteria = normalize_criteria(criteria)
        has_lists = any(isinstance(value, list) for value in criteria.values())
        if not has_lists and is_supported_criteria(self._entity_name, criteria):
            LOG.debug(f"Using store filtering for {self._entity_name} with criteria: {criteria}")
            return [self._to_model(record) for record in self._retrieve(criteria) or []]

        store_criteria = self._broadest_supported_subset(
            {key: value for key, value in criteria.items() if not isinstance(value, list)}
        )
        records = [
            record for record in self._retrieve(store_criteria) or [] if self._matches_filters(record, criteria)
        ]
        LOG.info(
            f"Filtered down to {len(records)} {self._entity_name} records using in-memory filters: {criteria}"
        )
        return [self._to_model(record) for record in records]

    def create(self, data: Union[M, Dict]) -> M:
        """
        Create a new record.

        Args:
            data: The data model, or wire payload, to create. Any `id` is dropped.

        Returns:
            The data model for the created record.
        """
        payload = self._to_payload(data)
        record = self.client.create(self._entity_name, payload)
        model = self._to_model(record)
        LOG.info(f"Created {self._entity_name} '{model.id}'.")
        return model

    def update(self, entity_id: str, changes: Union[M, Dict]) -> M:
        """
        Merge changes into an existing record.

        Args:
            entity_id: The opaque id of the record to update.
            changes: The data model, or wire payload, to merge in. Any `id` is dropped.

        Returns:
            The data model for the updated record.
        """
        LOG.debug(f"Updating {self._entity_name} '{entity_id}'.")
        return self._to_model(self.client.update(self._entity_name, entity_id, self._to_payload(changes)))

    def set_store_reference(self, store: Any):
        """
        Set a reference to the owning `EntityStore` for cross-entity operations.

        Args:
            store (entity_store.EntityStore): The store that provides access to
                the other entity managers.
        """
        self.store = store
