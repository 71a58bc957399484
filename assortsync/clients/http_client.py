##############################################################################
# Copyright (c) Assortsync Project developers. See top-level LICENSE and
# COPYRIGHT files for dates and other details. No copyright assignment is
# required to contribute to Assortsync.
##############################################################################

"""
HTTP implementation of the `EntityClient` interface.

`HttpEntityClient` talks to the entity store's REST API through a
`requests.Session`:

- `POST {api}/auth/login` to log in,
- `GET {api}/{entity}` with criteria and cursor as query parameters,
- `GET {api}/{entity}/{id}`,
- `POST {api}/{entity}` and `POST {api}/{entity}/{id}/{relation}`,
- `PUT {api}/{entity}/{id}`.

There is no retry logic. Any HTTP failure surfaces as `requests.HTTPError`,
except that a 404 on an id lookup raises `EntityNotFoundError` and a 404 on a
federated-id lookup means "no match".
"""

import logging
from typing import Any, Dict, List, Optional, Union

import requests

from assortsync.clients.entity_client import EntityClient, Page, Record
from assortsync.config.configfile import DEFAULT_API_URL
from assortsync.exceptions import EntityNotFoundError, NotAuthenticatedError


LOG = logging.getLogger("assortsync")


class HttpEntityClient(EntityClient):
    """
    A `requests`-based client for the remote entity store.

    Attributes:
        api_url (str): The base URL of the entity store API.
        timeout (float): Timeout in seconds applied to every request.
        session (requests.Session): The session used for every request.

    Methods:
        login: Log in and keep the returned bearer token for later requests.
        is_authenticated: Whether `login` has been called successfully.
        get: Fetch one record, a list of records, or a page of records.
        create: Create a record, or related records under a parent.
        update: Merge changes into an existing record.
    """

    def __init__(
        self,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 60,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the `HttpEntityClient`.

        Args:
            api_url: The base URL of the entity store API.
            timeout: Timeout in seconds applied to every request.
            session: An existing session to reuse. A new one is created otherwise.
        """
        super().__init__("http")
        self.api_url: str = api_url.rstrip("/")
        self.timeout: float = timeout
        self.session: requests.Session = session or requests.Session()
        self._token: Optional[str] = None
        self._org_slug: Optional[str] = None

    def _url(self, *parts: str) -> str:
        return "/".join([self.api_url, *(part.strip("/") for part in parts)])

    def login(self, org_slug: str, email: str, password: str):
        """
        Log in to the entity store and keep the bearer token for later requests.

        Args:
            org_slug: The organization identifier.
            email: The email of the user logging in.
            password: The password of the user logging in.

        Raises:
            requests.HTTPError: If the store rejects the credentials.
        """
        LOG.debug(f"Logging in to {self.api_url} as '{email}' for org '{org_slug}'...")
        response = self.session.post(
            self._url("auth", "login"),
            json={"orgSlug": org_slug, "email": email, "password": password},
            timeout=self.timeout,
        )
        response.raise_for_status()
        body = response.json()
        self._token = body.get("token") or body.get("accessToken")
        self._org_slug = org_slug
        LOG.info(f"Logged in to the entity store as '{email}' ({org_slug}).")

    def is_authenticated(self) -> bool:
        """
        Check whether this client has logged in.

        Returns:
            True if a token is held, False otherwise.
        """
        return self._token is not None

    def _headers(self, api_version: Optional[str] = None) -> Dict[str, str]:
        if not self.is_authenticated():
            raise NotAuthenticatedError("The entity store client must log in before making requests.")
        headers = {"Authorization": f"Bearer {self._token}", "X-Api-Org": self._org_slug}
        if api_version:
            headers["X-Api-Version"] = api_version
        return headers

    def _request(  # pylint: disable=too-many-arguments
        self,
        method: str,
        *path: str,
        params: Optional[Dict] = None,
        json: Optional[Any] = None,
        api_version: Optional[str] = None,
    ) -> requests.Response:
        url = self._url(*path)
        LOG.debug(f"{method} {url} params={params}")
        return self.session.request(
            method,
            url,
            params=params,
            json=json,
            headers=self._headers(api_version),
            timeout=self.timeout,
        )

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
        Query the entity store over HTTP.

        See [`EntityClient.get`][clients.entity_client.EntityClient.get] for the
        return shapes.

        Raises:
            EntityNotFoundError: If `entity_id` is given and the store answers 404.
            requests.HTTPError: For any other unsuccessful response.
        """
        if entity_id:
            response = self._request("GET", entity_name, entity_id)
            if response.status_code == 404:
                raise EntityNotFoundError(f"{entity_name} with ID '{entity_id}' not found in the entity store.")
            response.raise_for_status()
            return response.json()

        if federated_id:
            response = self._request("GET", entity_name, params={"federatedId": federated_id})
            if response.status_code == 404:
                return None
            response.raise_for_status()
            body = response.json()
            if isinstance(body, list):
                return body[0] if body else None
            return body or None

        params = dict(criteria or {})
        if next_page_key:
            params["nextPageKey"] = next_page_key
        response = self._request("GET", entity_name, params=params, api_version=api_version)
        response.raise_for_status()
        return response.json()

    def create(
        self,
        entity_name: str,
        payload: Dict,
        entity_id: Optional[str] = None,
        relation: Optional[str] = None,
    ) -> Union[Record, List[Record]]:
        """
        Create a record, or related records under a parent, over HTTP.

        Raises:
            requests.HTTPError: If the store rejects the request.
        """
        path = [entity_name, entity_id, relation] if entity_id and relation else [entity_name]
        response = self._request("POST", *path, json=payload)
        response.raise_for_status()
        return response.json()

    def update(self, entity_name: str, entity_id: str, payload: Dict) -> Record:
        """
        Merge `payload` into an existing record over HTTP.

        Raises:
            requests.HTTPError: If the store rejects the request.
        """
        response = self._request("PUT", entity_name, entity_id, json=payload)
        response.raise_for_status()
        return response.json()
