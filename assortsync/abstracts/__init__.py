##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Abstract building blocks shared across Assortsync.

Modules:
    factory: Defines `AssortsyncBaseFactory`, the registry/alias/plugin machinery
        used to select pluggable components such as entity-store clients.
"""

from assortsync.abstracts.factory import AssortsyncBaseFactory


__all__ = ["AssortsyncBaseFactory"]
