##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Used to store the application configuration.

The `config` package loads the `app.yaml` file that tells Assortsync which
entity-store client to use, where the remote API lives, and which type tags
to stamp on the projects and assortments it creates.

Modules:
    config_filepaths.py: Constants for the files and directories the configuration lives in.
    configfile.py: Handles locating, loading, and defaulting the application configuration.
    credentials.py: Resolves the login credentials from the environment or configuration.
"""
from copy import copy
from types import SimpleNamespace
from typing import Dict, List, Optional

from assortsync.utils import nested_dict_to_namespaces


SECTIONS: List[str] = ["entity_store", "sync"]


class Config:  # pylint: disable=R0903
    """
    The Config class, meant to store all Assortsync config settings in one place.

    Attributes:
        entity_store (Optional[SimpleNamespace]): Settings for the remote entity-store client.
        sync (Optional[SimpleNamespace]): Settings applied to the records the sync operations create.

    Methods:
        __copy__: Creates a shallow copy of the Config instance.
        __str__: Returns a formatted string representation of the Config instance.
        load_app_into_namespaces: Converts the provided configuration dictionary into namespaces
            and assigns them to the Config instance's attributes.
    """

    def __init__(self, app_dict: Dict):
        """
        Initializes the Config instance with configuration data from a dictionary.

        Args:
            app_dict: A dictionary containing configuration data for the application.
                The keys "entity_store" and "sync" are each converted into a
                `SimpleNamespace` and assigned to the matching attribute.
        """
        self.entity_store: Optional[SimpleNamespace] = None
        self.sync: Optional[SimpleNamespace] = None
        self.load_app_into_namespaces(app_dict)

    def __copy__(self) -> "Config":
        """
        Creates a shallow copy of the Config instance.

        Returns:
            A new Config instance with copied section attributes.
        """
        cls = self.__class__
        result = cls.__new__(cls)
        result.__dict__.update({section: copy(self.__dict__[section]) for section in SECTIONS})
        return result

    def __str__(self) -> str:
        """
        Returns a formatted string representation of the Config instance.

        Passwords are masked.

        Returns:
            A string containing the values of every configuration section.
        """
        formatted_str = "config:"
        for name in SECTIONS:
            attr = getattr(self, name)
            if attr is not None:
                items = (
                    f"    {k}: {'******' if k == 'password' and v else repr(v)}" for k, v in attr.__dict__.items()
                )
                joined_items = "\n".join(items)
                formatted_str += f"\n  {name}:\n{joined_items}"
            else:
                formatted_str += f"\n  {name}:\n    None"
        return formatted_str

    def load_app_into_namespaces(self, app_dict: Dict):
        """
        Converts the provided application dictionary into namespaces and assigns them
        to the Config instance's attributes.

        Args:
            app_dict: A dictionary containing configuration data for the application.
        """
        for field in SECTIONS:
            try:
                setattr(self, field, nested_dict_to_namespaces(app_dict[field]))
            except KeyError:
                # The sections are optional
                pass
