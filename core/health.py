"""
Connectivity checks for the database and the cache.

Each check returns ``None`` when the service answers and the failure message
otherwise, so callers can report every failing service at once.
"""

import logging
from typing import Dict, Optional

from django.core.cache import caches
from django.db import DatabaseError, connections

logger = logging.getLogger(__name__)

CACHE_KEY = "health_check"


def check_database(alias: str = "default") -> Optional[str]:
    try:
        connections[alias].ensure_connection()
    except DatabaseError as exc:
        logger.warning("Database health check failed: %s", exc)
        return str(exc)
    return None


def check_cache(alias: str = "default") -> Optional[str]:
    """Round-trip a short-lived key through the cache."""
    try:
        cache = caches[alias]
        cache.set(CACHE_KEY, "ok", 1)
        result = cache.get(CACHE_KEY)
    except Exception as exc:  # backend-specific connection errors
        logger.warning("Cache health check failed: %s", exc)
        return str(exc)
    if result != "ok":
        logger.warning("Cache health check failed: read back %r", result)
        return "Cache test failed"
    return None


def run_checks() -> Dict[str, Optional[str]]:
    return {"database": check_database(), "cache": check_cache()}
