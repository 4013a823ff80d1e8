"""
Local host name resolution.

The host name is decorative metadata on every event, so a failed lookup
falls back to a sentinel instead of raising.
"""

import logging
import socket
from functools import lru_cache

logger = logging.getLogger(__name__)

UNKNOWN_HOST = "unknown-host"


def resolve_host_name() -> str:
    """
    Look up the local host name.

    Returns:
        The host name, or UNKNOWN_HOST if it cannot be resolved.
    """
    try:
        host_name = socket.gethostname()
    except OSError as e:
        logger.warning(
            "Failed to resolve local host name",
            extra={"error": str(e), "fallback": UNKNOWN_HOST},
        )
        return UNKNOWN_HOST

    return host_name or UNKNOWN_HOST


@lru_cache()
def get_host_name() -> str:
    """Return the process-wide cached host name."""
    return resolve_host_name()
