"""
Ore API client library

Sessions, project versions and "latest matching version" lookups against an
Ore plugin repository such as <https://ore.spongepowered.org/>.
"""

from .errors import AuthenticationError, ConfigurationError, IllegalStateError, OreError
from .project import OreAPI, Project, Version, api_version_predicate, latest_version
from .session import RENEWAL_MARGIN, Session, SessionAuth, SessionManager

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "IllegalStateError",
    "OreAPI",
    "OreError",
    "Project",
    "RENEWAL_MARGIN",
    "Session",
    "SessionAuth",
    "SessionManager",
    "Version",
    "api_version_predicate",
    "latest_version",
]
