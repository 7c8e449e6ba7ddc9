import logging
from typing import Iterator, List, Optional, Union

import httpx

from .. import config, http
from ..errors import ConfigurationError, IllegalStateError
from ..session import SessionAuth, SessionManager
from .classes import Project, Version
from .selection import Predicate, latest_version

logger = logging.getLogger(__name__)

ProjectLike = Union[Project, str]


class OreAPI:
    """
    A client for fetching project information from an Ore instance.

    An `OreAPI` instance can be used as a context manager that opens an HTTP
    client on entry and closes it on exit. If a client is passed in, it is
    used as-is and left open.

    Sessions are handled by :attr:`sessions`; every request gets a fresh
    ``OreApi session="..."`` header, authenticating first if needed.

    :param str url: The base URL of the API; defaults to
        :data:`oreapi.config.ORE_API_URL`

    :param api_key: Optional API key to authenticate with

    :param client: Optional `httpx.Client` to use instead of opening one
    """
    c: Optional[httpx.Client]

    def __init__(
        self,
        url: str = config.ORE_API_URL,
        api_key: Optional[str] = None,
        *,
        client: Optional[httpx.Client] = None,
    ) -> None:
        if not url:
            raise ConfigurationError("url")
        self.url: str = url.rstrip("/") + "/"
        self.c = client
        self.cman = None
        self.sessions = SessionManager(self.url_for("authenticate"), api_key, client=client)
        self.auth = SessionAuth(self.sessions)

    def __enter__(self) -> "OreAPI":
        if self.c is None:
            self.cman = http.client()
            self.c = self.sessions.client = self.cman.__enter__()
        return self

    def __exit__(self, *exc) -> None:
        if self.cman is not None:
            try:
                self.cman.__exit__(*exc)
            finally:
                self.c = self.sessions.client = self.cman = None

    def url_for(self, path: str) -> str:
        return self.url + path.lstrip("/")

    def get(self, path: str, **kwargs) -> httpx.Response:
        """Make an authenticated GET request against the API.

        The response is returned whatever its status.
        """
        if self.c is None:
            raise IllegalStateError("No HTTP client; use OreAPI as a context manager")
        url = self.url_for(path)
        logger.debug("GET %s %r", url, kwargs.get('params'))
        return self.c.get(url, headers=http.default_headers(), auth=self.auth, **kwargs)

    def get_versions(self, project: ProjectLike, offset: int = 0, limit: int = 10) -> List[Version]:
        """
        Fetch one page of versions of a project, in the order Ore lists them.

        An unknown project has no versions.

        :param project: a `Project` or a bare plugin id
        :param int offset: how many versions to skip
        :param int limit: the page size
        :rtype: List[Version]
        :raises ValueError: on a negative offset or non-positive limit, or if
            the response can't be understood
        :raises httpx.HTTPStatusError: if the API responds with an HTTP error
            code other than 404
        """
        if offset < 0:
            raise ValueError("offset")
        if limit <= 0:
            raise ValueError("limit")
        if not isinstance(project, Project):
            project = Project(project)

        resp = self.get(
            f"projects/{project.plugin_id}/versions",
            params={'offset': offset, 'limit': limit},
        )
        if resp.status_code == 404:
            return []
        resp.raise_for_status()

        data = resp.json()
        result = data.get('result') if isinstance(data, dict) else None
        if not isinstance(result, list):
            raise ValueError(f'no result array in versions of {project.plugin_id}')
        return [Version.from_json(project, item) for item in result]

    def iter_versions(self, project: ProjectLike, page_size: int = 25) -> Iterator[Version]:
        """Page through every version of a project.

        Each page starts where the previous one ended, and the listing ends on
        the first empty page, so a server that returns fewer than
        ``page_size`` versions per page is still read to the end.
        """
        if not isinstance(project, Project):
            project = Project(project)
        offset = 0
        while True:
            page = self.get_versions(project, offset, page_size)
            if not page:
                break
            yield from page
            offset += len(page)

    def latest_version(
        self, project: ProjectLike, predicate: Optional[Predicate] = None, page_size: int = 25,
    ) -> Optional[Version]:
        """The most recent version of a project accepted by the predicate."""
        return latest_version(self.iter_versions(project, page_size), predicate)
