"""
Picking "the latest version that fits" out of a list of versions.
"""
from __future__ import annotations
import logging
from typing import Callable, Iterable, Optional

from .classes import Version

__all__ = 'Predicate', 'latest_version', 'api_version_predicate'

logger = logging.getLogger(__name__)

Predicate = Callable[[Version], bool]


def latest_version(versions: Iterable[Version], predicate: Optional[Predicate] = None) -> Optional[Version]:
    """Get the most recently created version matching the predicate.

    A single pass: only versions created strictly after the current best are
    tested, so a version no newer than the best so far is never given to the
    predicate. On equal timestamps the first match wins.

    A predicate that raises counts as "no match" for that version.
    """
    best = None
    for version in versions:
        if best is None or version.created_at > best.created_at:
            if predicate is None:
                best = version
                continue
            try:
                matched = predicate(version)
            except Exception:
                logger.debug("Predicate failed on %s %s", version.project_id, version.name,
                             exc_info=True)
                continue
            if matched:
                best = version
    return best


def api_version_predicate(prefix: str) -> Predicate:
    """Match versions built against the given SpongeAPI version or a
    sub-version of it (``"7"`` matches ``"7.3.0"`` but not ``"70.0"``).
    """
    def predicate(version: Version) -> bool:
        api = version.api_version
        return api is not None and (api == prefix or api.startswith(prefix + '.'))
    return predicate
