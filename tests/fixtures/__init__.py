##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
This directory is for help modularizing fixture definitions so that we don't have to
store every single fixture in the `conftest.py` file.

Each file groups the fixtures of one concern (clients, configuration, sample
records). Every file in here is registered as a pytest plugin by the top-level
`conftest.py`, so its fixtures are available to the whole test suite.
"""
