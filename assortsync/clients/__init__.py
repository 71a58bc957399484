##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Clients for the remote entity store.

The `clients` package provides a unified interface (`EntityClient`) over the
entity store's three operations (`get`, `create`, `update`) plus login, along
with concrete implementations and a factory to select between them.

Modules:
    entity_client: Defines the abstract `EntityClient` base class.
    http_client: `HttpEntityClient`, which talks to the store's REST API with `requests`.
    memory_client: `InMemoryEntityClient`, a local stand-in used for dry runs and tests.
    client_factory: Contains `EntityClientFactory`, used to select and instantiate a client.
"""
