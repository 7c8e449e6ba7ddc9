from __future__ import annotations
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping, NamedTuple, Optional

from .. import config
from ..errors import ConfigurationError
from ..util import parse_instant

#: Plugin id of the platform API every Sponge plugin depends on
SPONGEAPI = 'spongeapi'


class Project:
    """
    A project on Ore, identified by its plugin id.

    The owner and name (its "namespace") are only needed to build the page
    URL, and are unknown until set.
    """

    def __init__(self, plugin_id: str, owner: Optional[str] = None, name: Optional[str] = None):
        if not plugin_id:
            raise ConfigurationError("plugin_id")
        self.plugin_id = plugin_id
        self.owner = owner
        self.name = name

    def set_namespace(self, owner: Optional[str], name: Optional[str]) -> None:
        self.owner = owner
        self.name = name

    @property
    def page(self) -> Optional[str]:
        """URL of the project page, or None without a full namespace."""
        if self.owner is None or self.name is None:
            return None
        return f"{config.ORE_WEB_URL.rstrip('/')}/{self.owner}/{self.name}"

    def __repr__(self):
        return f"<Project {self.plugin_id!r}>"

    def __str__(self):
        return self.plugin_id


class Version(NamedTuple):
    """
    One published version of a project.
    """

    #: The project this is a version of
    project: Project

    #: The version name, as shown on Ore
    name: str

    #: When the version was published (timezone-aware)
    created_at: datetime

    #: Declared dependencies, plugin id to version. A value of None means the
    #: dependency is declared without a pinned version.
    dependencies: Mapping[str, Optional[str]] = MappingProxyType({})

    @property
    def project_id(self) -> str:
        return self.project.plugin_id

    @property
    def api_version(self) -> Optional[str]:
        """The SpongeAPI version this was built against, if declared."""
        return self.dependencies.get(SPONGEAPI)

    @property
    def page(self) -> Optional[str]:
        page = self.project.page
        if page is None:
            return None
        return f"{page}/versions/{self.name}"

    @classmethod
    def from_json(cls, project: Project, data: Mapping[str, Any]) -> Version:
        """Build a version from one element of the ``result`` array.

        Raises:
            ValueError: if a required field is missing or malformed
        """
        if not isinstance(data, dict):
            raise ValueError(f'version is not an object: {data!r}')

        name = data.get('name')
        if not isinstance(name, str):
            raise ValueError(f'version has no name: {data!r}')

        created_at = data.get('created_at')
        if not isinstance(created_at, str):
            raise ValueError(f'version {name} has no created_at')
        created_at = parse_instant(created_at)

        return cls(project, name, created_at, parse_dependencies(data.get('dependencies')))


def parse_dependencies(entries) -> Mapping[str, Optional[str]]:
    """Turn Ore's list of ``{plugin_id, version}`` into a read-only mapping.

    Later entries for the same plugin id replace earlier ones.
    """
    if entries is None:
        entries = []
    if not isinstance(entries, list):
        raise ValueError(f'dependencies is not an array: {entries!r}')

    deps = {}
    for entry in entries:
        if not isinstance(entry, dict):
            raise ValueError(f'dependency is not an object: {entry!r}')
        plugin_id = entry.get('plugin_id')
        if not isinstance(plugin_id, str):
            raise ValueError(f'dependency has no plugin_id: {entry!r}')
        deps[plugin_id] = entry.get('version')
    return MappingProxyType(deps)
