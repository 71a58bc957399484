##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Assortsync: find-or-create integration glue for a remote entity store.

This module contains the source code for Assortsync.
"""

__version__ = "0.4.0"
VERSION = __version__
