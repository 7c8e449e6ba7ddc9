"""
Session handling for the Ore API.

Ore wants a short-lived session token on every request. The token is obtained
by POSTing to ``/authenticate`` (optionally with an API key) and has to be
replaced before it expires. :class:`SessionManager` does that lazily, and
:class:`SessionAuth` plugs it into httpx.
"""
from __future__ import annotations
from datetime import datetime, timedelta, timezone
import logging
import threading
from typing import NamedTuple, Optional

import httpx

from . import http
from .errors import AuthenticationError, ConfigurationError, IllegalStateError
from .util import parse_instant

__all__ = 'RENEWAL_MARGIN', 'Session', 'SessionManager', 'SessionAuth'

logger = logging.getLogger(__name__)

#: A session this close to its expiration is treated as already expired
RENEWAL_MARGIN = timedelta(seconds=30)


class Session(NamedTuple):
    #: The opaque token to present as ``OreApi session="..."``
    token: str

    #: When the server stops accepting the token
    expires_at: datetime


class SessionManager:
    """
    Owns one Ore session and renews it when needed.

    Nothing happens on construction; the first call to
    :meth:`get_or_create_session` authenticates.

    :param str auth_url: The full URL of the authentication endpoint
    :param api_key: Optional API key, sent as ``OreApi apikey="..."``
    :param client: Optional `httpx.Client` to post through. Without one, a
        client is opened (and closed) for every authentication.
    """

    def __init__(
        self,
        auth_url: str,
        api_key: Optional[str] = None,
        *,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if not auth_url:
            raise ConfigurationError("auth_url")
        self.auth_url = auth_url
        self.api_key = api_key
        self.client = client
        self._session: Optional[Session] = None
        # Reentrant so get_or_create_session() can call authenticate()
        self._lock = threading.RLock()

    def get_session(self) -> Optional[str]:
        """The current token, without authenticating. None if there never was one."""
        session = self._session
        return None if session is None else session.token

    def get_expiration(self) -> datetime:
        session = self._session
        if session is None:
            raise IllegalStateError("No session")
        return session.expires_at

    def needs_renewal(self) -> bool:
        session = self._session
        if session is None:
            return True
        return session.expires_at - datetime.now(timezone.utc) < RENEWAL_MARGIN

    def get_or_create_session(self) -> str:
        """Get a token that is good for at least :data:`RENEWAL_MARGIN`.

        Authenticates if there is no session yet or the current one is about
        to expire; otherwise no request is made.
        """
        with self._lock:
            if self.needs_renewal():
                self.authenticate()
            else:
                logger.debug("Reusing session expiring at %s", self._session.expires_at)
            return self._session.token

    def authenticate(self) -> None:
        """Request a new session and store it.

        The stored session is only replaced once the response has been fully
        validated; on any failure the previous one (if any) is kept.

        :raises AuthenticationError: if the request fails, the server answers
            with an error status, or the body lacks ``session``/``expires``
        """
        with self._lock:
            logger.info("Authenticating with %s", self.auth_url)
            if self.client is not None:
                session = self._request_session(self.client)
            else:
                with http.client() as client:
                    session = self._request_session(client)
            self._session = session
            logger.info("Got session expiring at %s", session.expires_at)

    def _request_session(self, client: httpx.Client) -> Session:
        headers = http.default_headers()
        if self.api_key is not None:
            headers['Authorization'] = f'OreApi apikey="{self.api_key}"'

        try:
            resp = client.post(self.auth_url, headers=headers)
        except httpx.HTTPError as exc:
            raise AuthenticationError(f"Could not reach {self.auth_url}: {exc}") from exc

        if not resp.is_success:
            raise AuthenticationError(
                f"Authentication refused with status {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise AuthenticationError("Authentication response is not JSON") from exc
        if not isinstance(data, dict):
            raise AuthenticationError("Authentication response is not an object")

        token = data.get('session')
        expires = data.get('expires')
        if not isinstance(token, str):
            raise AuthenticationError("Authentication response has no session")
        if not isinstance(expires, str):
            raise AuthenticationError("Authentication response has no expiration")

        try:
            expires_at = parse_instant(expires)
        except ValueError as exc:
            raise AuthenticationError(f"Bad expiration: {expires!r}") from exc

        return Session(token, expires_at)


class SessionAuth(httpx.Auth):
    """
    httpx authentication that presents the manager's session.

    The token is fetched right before each request, so a long-lived client
    keeps working across renewals.
    """

    def __init__(self, manager: SessionManager):
        self.manager = manager

    def auth_flow(self, request):
        token = self.manager.get_or_create_session()
        request.headers['Authorization'] = f'OreApi session="{token}"'
        yield request
