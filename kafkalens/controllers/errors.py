"""Exception hierarchy for cluster gateway failures.

Every remote failure surfaces as a ``GatewayError`` subclass. Per-entity
delete failures are not exceptions; they are reported as ``DeleteOutcome``
values.
"""

from __future__ import annotations


class GatewayError(Exception):
    """Base exception for any failed cluster call."""


class ClusterConnectionError(GatewayError):
    """Client or admin construction failed (bad config, unreachable cluster)."""


class AuthTokenError(ClusterConnectionError):
    """Token provider failed or exceeded its time cap."""


class FetchError(GatewayError):
    """Metadata, watermark or group list retrieval failed."""


class DeleteError(GatewayError):
    """An admin delete request failed as a whole."""


__all__ = [
    "AuthTokenError",
    "ClusterConnectionError",
    "DeleteError",
    "FetchError",
    "GatewayError",
]
