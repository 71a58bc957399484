##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
In-memory implementation of the `EntityClient` interface.

`InMemoryEntityClient` keeps every record in process memory. It behaves like
the remote store where it matters to callers: list queries only accept the
indexed filter shapes, V2 list calls return cursor pages, and creating through
the assortment `items` relation produces assortment-item join records. It's
used by `--local` runs and by the test suite.
"""

import logging
import uuid
from collections import defaultdict
from copy import deepcopy
from typing import Dict, List, Optional, Union

from assortsync.access_patterns.criteria import normalize_criteria, validate_criteria
from assortsync.clients.entity_client import API_VERSION_V2, EntityClient, Page, Record
from assortsync.exceptions import EntityNotFoundError
from assortsync.utils import get_singular_of_entity


LOG = logging.getLogger("assortsync")


class InMemoryEntityClient(EntityClient):
    """
    A process-local stand-in for the remote entity store.

    Attributes:
        page_size (int): The number of records per V2 page.
        enforce_access_patterns (bool): Reject criteria the real store doesn't index.
        logged_in_as (Optional[str]): The email passed to the last `login` call.

    Methods:
        login: Record the login; no credentials are checked.
        get: Fetch one record, a list of records, or a page of records.
        create: Create a record, or related records under a parent.
        update: Merge changes into an existing record.
        count: Count the records of an entity kind.
    """

    # Projects are workspaces in the store
    TABLE_ALIASES = {"project": "workspace"}

    def __init__(self, page_size: int = 100, enforce_access_patterns: bool = True):
        """
        Initialize the `InMemoryEntityClient`.

        Args:
            page_size: The number of records per V2 page.
            enforce_access_patterns: Reject criteria the real store doesn't index.
        """
        super().__init__("memory")
        self.page_size: int = page_size
        self.enforce_access_patterns: bool = enforce_access_patterns
        self.logged_in_as: Optional[str] = None
        self._tables: Dict[str, Dict[str, Record]] = defaultdict(dict)

    def _table(self, entity_name: str) -> Dict[str, Record]:
        return self._tables[self.TABLE_ALIASES.get(entity_name, entity_name)]

    def _insert(self, entity_name: str, payload: Dict) -> Record:
        record = deepcopy(payload)
        record.setdefault("id", str(uuid.uuid4()))
        self._table(entity_name)[record["id"]] = record
        LOG.debug(f"Inserted {entity_name} '{record['id']}' into the in-memory store.")
        return deepcopy(record)

    def login(self, org_slug: str, email: str, password: str):
        """
        Record the login. No credentials are checked.

        Args:
            org_slug: The organization identifier.
            email: The email of the user logging in.
            password: Ignored.
        """
        self.logged_in_as = email
        LOG.debug(f"In-memory entity store login as '{email}' ({org_slug}).")

    def count(self, entity_name: str) -> int:
        """
        Count the records of an entity kind.

        Args:
            entity_name: The entity name, e.g. `item`.

        Returns:
            The number of stored records.
        """
        return len(self._table(entity_name))

    def get(  # pylint: disable=too-many-arguments
        self,
        entity_name: str,
        entity_id: Optional[str] = None,
        criteria: Optional[Dict] = None,
        federated_id: Optional[str] = None,
        next_page_key: Optional[str] = None,
        api_version: Optional[str] = None,
    ) -> Union[Record, List[Record], Page, None]:
        """
        Query the in-memory store.

        See [`EntityClient.get`][clients.entity_client.EntityClient.get] for the
        return shapes.

        Raises:
            EntityNotFoundError: If `entity_id` is given and no such record exists.
            UnsupportedCriteriaError: If `criteria` is not an indexed shape and
                access patterns are enforced.
        """
        table = self._table(entity_name)

        if entity_id:
            if entity_id not in table:
                raise EntityNotFoundError(f"{entity_name} with ID '{entity_id}' not found in the entity store.")
            return deepcopy(table[entity_id])

        if federated_id:
            for record in table.values():
                if record.get("federatedId") == federated_id:
                    return deepcopy(record)
            return None

        criteria = normalize_criteria(criteria)
        if self.enforce_access_patterns:
            validate_criteria(entity_name, criteria)
        records = [
            deepcopy(record)
            for record in table.values()
            if all(record.get(key) == value for key, value in criteria.items())
        ]

        if api_version == API_VERSION_V2:
            offset = int(next_page_key or 0)
            page = records[offset : offset + self.page_size]
            return {"results": page, "nextPageKey": str(offset + self.page_size) if page else None}

        return records

    def create(
        self,
        entity_name: str,
        payload: Dict,
        entity_id: Optional[str] = None,
        relation: Optional[str] = None,
    ) -> Union[Record, List[Record]]:
        """
        Create a record, or related records under a parent.

        Creating through a relation turns `{"<child>Ids": [...]}` into one
        `<parent>-<child>` join record per id, e.g. the `items` relation of an
        assortment creates `assortment-item` records.

        Raises:
            EntityNotFoundError: If the parent of a relation doesn't exist.
        """
        if entity_id and relation:
            if entity_id not in self._table(entity_name):
                raise EntityNotFoundError(f"{entity_name} with ID '{entity_id}' not found in the entity store.")
            child = get_singular_of_entity(relation)
            join_name = f"{entity_name}-{child}"
            return [
                self._insert(join_name, {f"{child}Id": child_id, f"{entity_name}Id": entity_id})
                for child_id in payload.get(f"{child}Ids", [])
            ]

        return self._insert(entity_name, payload)

    def update(self, entity_name: str, entity_id: str, payload: Dict) -> Record:
        """
        Merge `payload` into an existing record.

        Raises:
            EntityNotFoundError: If no record with `entity_id` exists.
        """
        table = self._table(entity_name)
        if entity_id not in table:
            raise EntityNotFoundError(f"{entity_name} with ID '{entity_id}' not found in the entity store.")
        record = table[entity_id]
        record.update(deepcopy(payload))
        record["id"] = entity_id
        return deepcopy(record)
