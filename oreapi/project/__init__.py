"""
Ore projects and their versions.
"""

from .classes import SPONGEAPI, Project, Version
from .client import OreAPI
from .selection import Predicate, api_version_predicate, latest_version

__all__ = [
    "OreAPI",
    "Predicate",
    "Project",
    "SPONGEAPI",
    "Version",
    "api_version_predicate",
    "latest_version",
]
