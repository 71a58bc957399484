##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Module of all Assortsync-specific exception types.
"""

# Pylint complains that these exceptions are no different from Exception
# but we don't care, we just need new names for exceptions here
# pylint: disable=W0235

__all__ = (
    "MissingFederatedIdError",
    "UnsupportedCriteriaError",
    "EntityNotFoundError",
    "NotAuthenticatedError",
    "MissingCredentialsError",
    "ClientNotSupportedError",
    "EntityManagerNotSupportedError",
    "UnsupportedDataModelError",
)


class MissingFederatedIdError(ValueError):
    """
    Exception to signal that an item can't be upserted because it
    has no federated identifier to look it up by.
    """

    def __init__(self, message: str = "Item must have a federatedId to be upserted."):
        super().__init__(message)


class UnsupportedCriteriaError(Exception):
    """
    Exception to signal that a combination of filter criteria is not one
    of the access patterns indexed by the entity store.
    """

    def __init__(self, message):
        super().__init__(message)


class EntityNotFoundError(Exception):
    """
    Exception to signal that an entity does not exist in the entity store.
    """

    def __init__(self, message):
        super().__init__(message)


class NotAuthenticatedError(Exception):
    """
    Exception to signal that a client was used before logging in.
    """


class MissingCredentialsError(Exception):
    """
    Exception to signal that the organization, email, or password needed
    to log in could not be found in the environment or configuration.
    """

    def __init__(self, message):
        super().__init__(message)


class ClientNotSupportedError(Exception):
    """
    Exception to signal that the provided entity client is not supported.
    """

    def __init__(self, message):
        super().__init__(message)


class EntityManagerNotSupportedError(Exception):
    """
    Exception to signal that the provided entity type has no manager.
    """

    def __init__(self, message):
        super().__init__(message)


class UnsupportedDataModelError(Exception):
    """
    Exception to signal that a payload can't be matched to any data model.
    """

    def __init__(self, message):
        super().__init__(message)
