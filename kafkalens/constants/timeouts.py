"""Timeout constants for the console.

All timeout values for cluster requests and credential acquisition.
"""

from typing import Final

# ============================================================================
# Cluster request timeouts (milliseconds, as accepted on the command line)
# ============================================================================

CLUSTER_REQUEST_TIMEOUT_MS: Final = 10_000

# ============================================================================
# Credential timeouts (float, in seconds)
# ============================================================================

# Hard cap for one IAM token generation. Not configurable.
AUTH_TOKEN_TIMEOUT: Final = 10.0

__all__ = [
    "AUTH_TOKEN_TIMEOUT",
    "CLUSTER_REQUEST_TIMEOUT_MS",
]
