##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
This module houses dataclasses that define the format of the records
exchanged with the entity store.

Attributes are snake_case in Python and camelCase on the wire. Any wire key
that isn't an explicit field is kept in `additional_data` so a record read
from the store is written back with the same keys.
"""

import json
import logging
import os
from abc import ABC
from dataclasses import Field, asdict, dataclass, field
from dataclasses import fields as dataclass_fields
from typing import ClassVar, Dict, List, Optional, Tuple, Type, TypeVar

from filelock import FileLock

from assortsync.exceptions import UnsupportedDataModelError
from assortsync.utils import camel_to_snake, snake_to_camel


LOG = logging.getLogger("assortsync")
T = TypeVar("T", bound="BaseDataModel")


@dataclass
class BaseDataModel(ABC):
    """
    A base class for entity dataclasses that provides serialization to and
    from the entity store's wire format, with support for additional data.

    Attributes:
        additional_data: Wire keys not explicitly defined as fields in the dataclass.
        entity_name: The name of this entity kind in the entity store. Must be
            defined in subclasses.

    Methods:
        to_dict: Convert the dataclass instance to a dictionary.
        to_json: Serialize the dataclass instance to a JSON string.
        from_dict (classmethod): Create an instance of the dataclass from a dictionary.
        from_json (classmethod): Create an instance of the dataclass from a JSON string.
        to_payload: Convert the instance to the camelCase payload the entity store expects.
        from_payload (classmethod): Create an instance from a record returned by the entity store.
        dump_to_json_file: Dump the wire payload of this dataclass to a JSON file.
        load_from_json_file (classmethod): Load a wire payload stored in a JSON file.
        get_instance_fields: Retrieve the fields associated with this dataclass instance.
        get_class_fields (classmethod): Retrieve the fields associated with the dataclass itself.
    """

    entity_name: ClassVar[str] = ""

    additional_data: Dict = field(default_factory=dict)

    def to_dict(self) -> Dict:
        """
        Convert the dataclass to a dictionary.

        Returns:
            The dataclass as a dictionary.
        """
        return asdict(self)

    def to_json(self) -> str:
        """
        Serialize the dataclass to a JSON string.

        Returns:
            The dataclass as a JSON string.
        """
        return json.dumps(self.to_dict())

    @classmethod
    def from_dict(cls: Type[T], data: Dict) -> T:
        """
        Create an instance of the dataclass from a dictionary.

        Args:
            data: A dictionary to turn into an instance of this dataclass.

        Returns:
            An instance of the dataclass that called this.
        """
        return cls(**data)

    @classmethod
    def from_json(cls: Type[T], json_str: str) -> T:
        """
        Create an instance of the dataclass from a JSON string.

        Args:
            json_str: A JSON string to turn into an instance of this dataclass.

        Returns:
            An instance of the dataclass that called this.
        """
        data = json.loads(json_str)
        return cls.from_dict(data)

    def to_payload(self, include_id: bool = True) -> Dict:
        """
        Convert this model to the camelCase payload the entity store expects.

        Fields that are `None` are left out so that an update never blanks a
        value the caller didn't set.

        Args:
            include_id: Whether to include the `id` key in the payload.

        Returns:
            The wire payload for this model.
        """
        payload = {}
        for model_field in self.get_instance_fields():
            if model_field.name == "additional_data":
                continue
            if model_field.name == "id" and not include_id:
                continue
            value = getattr(self, model_field.name)
            if value is not None:
                payload[snake_to_camel(model_field.name)] = value

        for key, value in self.additional_data.items():
            if key == "id" and not include_id:
                continue
            payload.setdefault(key, value)
        return payload

    @classmethod
    def from_payload(cls: Type[T], payload: Dict) -> T:
        """
        Create an instance of the dataclass from an entity store record.

        Args:
            payload: A camelCase record as returned by the entity store.

        Returns:
            An instance of the dataclass that called this.
        """
        field_names = {f.name for f in cls.get_class_fields() if f.name != "additional_data"}
        kwargs = {}
        additional_data = {}
        for key, value in payload.items():
            attr = camel_to_snake(key)
            if attr in field_names:
                kwargs[attr] = value
            else:
                additional_data[key] = value
        return cls(**kwargs, additional_data=additional_data)

    def dump_to_json_file(self, filepath: str):
        """
        Dump the wire payload of this dataclass to a JSON file.

        Args:
            filepath: The path to the JSON file where the data will be written.

        Raises:
            ValueError: If the `filepath` is not provided or is invalid.
        """
        if not filepath:
            raise ValueError("A valid file path must be provided.")

        dirname = os.path.dirname(filepath)
        if dirname:
            os.makedirs(dirname, exist_ok=True)

        lock_file = f"{filepath}.lock"
        with FileLock(lock_file):  # pylint: disable=abstract-class-instantiated
            temp_filepath = f"{filepath}.tmp"  # Use a temporary file for atomic writes
            with open(temp_filepath, "w") as json_file:
                json.dump(self.to_payload(), json_file, indent=4)

            os.replace(temp_filepath, filepath)

        LOG.debug(f"Data successfully dumped to {filepath}.")

    @classmethod
    def load_from_json_file(cls: Type[T], filepath: str) -> T:
        """
        Load a wire payload stored in a JSON file into this dataclass.

        Args:
            filepath: The path to the JSON file where the data is located.

        Raises:
            ValueError: If the `filepath` is not provided or is invalid.
        """
        if not filepath or not os.path.exists(filepath):
            raise ValueError("A valid file path must be provided.")

        lock_file = f"{filepath}.lock"
        with FileLock(lock_file):  # pylint: disable=abstract-class-instantiated
            with open(filepath, "r") as json_file:
                data = json.load(json_file)

        return cls.from_payload(data)

    def get_instance_fields(self) -> Tuple[Field]:
        """
        Get the fields associated with this instance.

        Returns:
            A tuple of dataclass.Field objects representing the fields in this data class.
        """
        return dataclass_fields(self)

    @classmethod
    def get_class_fields(cls) -> Tuple[Field]:
        """
        Get the fields associated with this object.

        Returns:
            A tuple of dataclass.Field objects representing the fields in this data class.
        """
        return dataclass_fields(cls)


@dataclass
class ProjectModel(BaseDataModel):
    """
    A project: the store's workspace container specialized with a root
    workspace type of `PROJECT`.

    Attributes:
        id (str): The opaque ID of the project.
        name (str): The name of the project, e.g. a season.
        root_workspace_type (str): The root workspace type tag.
    """

    entity_name: ClassVar[str] = "workspace"

    id: Optional[str] = None  # pylint: disable=invalid-name
    name: Optional[str] = None
    root_workspace_type: Optional[str] = None


@dataclass
class AssortmentModel(BaseDataModel):
    """
    An assortment belonging to a project.

    Attributes:
        id (str): The opaque ID of the assortment.
        name (str): The name of the assortment.
        workspace_id (str): The ID of the workspace the assortment lives in.
        root_workspace_id (str): The ID of the root workspace (the project).
        assortment_type (str): The assortment type tag, e.g. `INTEGRATION`.
        parent_id (str): A reference to the parent record, if any.
    """

    entity_name: ClassVar[str] = "assortment"

    id: Optional[str] = None  # pylint: disable=invalid-name
    name: Optional[str] = None
    workspace_id: Optional[str] = None
    root_workspace_id: Optional[str] = None
    assortment_type: Optional[str] = None
    parent_id: Optional[str] = None


@dataclass
class ItemModel(BaseDataModel):
    """
    An item, upserted by its federated identifier.

    Attributes:
        id (str): The opaque ID of the item.
        name (str): The name of the item.
        federated_id (str): The external system's identifier for the item.
        item_family_id (str): The ID of the family this item belongs to.
        role (str): The role of the item within its family (`family`, `option`, or `variant`).
        option_group (str): For options, the group the option belongs to (`color` or `size`).
    """

    entity_name: ClassVar[str] = "item"

    id: Optional[str] = None  # pylint: disable=invalid-name
    name: Optional[str] = None
    federated_id: Optional[str] = None
    item_family_id: Optional[str] = None
    role: Optional[str] = None
    option_group: Optional[str] = None


@dataclass
class ProjectItemModel(BaseDataModel):
    """
    The join record linking an item to a project.

    Attributes:
        id (str): The opaque ID of the project item.
        item_id (str): The ID of the linked item.
        project_id (str): The ID of the linked project.
    """

    entity_name: ClassVar[str] = "project-item"

    id: Optional[str] = None  # pylint: disable=invalid-name
    item_id: Optional[str] = None
    project_id: Optional[str] = None


@dataclass
class AssortmentItemModel(BaseDataModel):
    """
    The join record linking an item to an assortment.

    Attributes:
        id (str): The opaque ID of the assortment item.
        item_id (str): The ID of the linked item.
        assortment_id (str): The ID of the linked assortment.
    """

    entity_name: ClassVar[str] = "assortment-item"

    id: Optional[str] = None  # pylint: disable=invalid-name
    item_id: Optional[str] = None
    assortment_id: Optional[str] = None


MODEL_CLASSES: List[Type[BaseDataModel]] = [
    ProjectModel,
    AssortmentModel,
    ItemModel,
    ProjectItemModel,
    AssortmentItemModel,
]


def get_model_class(entity_name: str) -> Type[BaseDataModel]:
    """
    Find the data model for an entity store entity name.

    `project` and `workspace` both map to `ProjectModel`.

    Args:
        entity_name: The entity name as used on the wire.

    Returns:
        The matching data model class.

    Raises:
        UnsupportedDataModelError: If no model exists for `entity_name`.
    """
    if entity_name == "project":
        return ProjectModel
    for model_class in MODEL_CLASSES:
        if model_class.entity_name == entity_name:
            return model_class
    raise UnsupportedDataModelError(f"No data model exists for entity '{entity_name}'.")
