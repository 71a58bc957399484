##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
This module stores constants representing file paths that will be needed for
Assortsync's configuration.
"""

import os


APP_FILENAME: str = "app.yaml"
USER_HOME: str = os.path.expanduser("~")
ASSORTSYNC_HOME: str = os.path.join(USER_HOME, ".assortsync")
CONFIG_PATH_FILE: str = os.path.join(ASSORTSYNC_HOME, "config_path.txt")
