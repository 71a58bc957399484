##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
Resolves the credentials used to log in to the remote entity store.

The organization slug, email, and password are read from the environment
first (`CONTRAIL_ORG_SLUG`, `CONTRAIL_EMAIL`, `CONTRAIL_PASSWORD`) and fall
back to the `entity_store` section of the configuration file.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from assortsync.config import Config
from assortsync.exceptions import MissingCredentialsError


LOG = logging.getLogger("assortsync")

ENV_VARS = {
    "org_slug": "CONTRAIL_ORG_SLUG",
    "email": "CONTRAIL_EMAIL",
    "password": "CONTRAIL_PASSWORD",
}


@dataclass(frozen=True)
class Credentials:
    """
    Login credentials for the entity store.

    Attributes:
        org_slug: The organization identifier.
        email: The email of the user logging in.
        password: The password of the user logging in.
    """

    org_slug: str
    email: str
    password: str

    def __repr__(self) -> str:
        return f"Credentials(org_slug={self.org_slug!r}, email={self.email!r}, password='******')"


def get_credentials(config: Optional[Config] = None) -> Credentials:
    """
    Build the login credentials from the environment, falling back to the config.

    Args:
        config: The configuration to fall back to. Defaults to the global `CONFIG`.

    Returns:
        The resolved credentials.

    Raises:
        MissingCredentialsError: If any of the three values can't be found.
    """
    if config is None:
        from assortsync.config import configfile  # pylint: disable=import-outside-toplevel

        config = configfile.CONFIG

    store_config = getattr(config, "entity_store", None)
    values = {}
    missing = []
    for field, env_var in ENV_VARS.items():
        value = os.environ.get(env_var) or getattr(store_config, field, None)
        if not value:
            missing.append(env_var)
        values[field] = value

    if missing:
        raise MissingCredentialsError(
            f"Missing entity store credentials: set {', '.join(missing)} in the environment "
            "or the matching keys in the 'entity_store' section of app.yaml."
        )

    LOG.debug(f"Resolved credentials for org '{values['org_slug']}' as '{values['email']}'.")
    return Credentials(**values)
