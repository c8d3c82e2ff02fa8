"""Controllers module for KafkaLens.

This module provides the cluster gateway interface and its Kafka
implementation.
"""

from __future__ import annotations

# Base classes
from kafkalens.controllers.base import BaseController, matches_prefix

# Cluster domain
from kafkalens.controllers.cluster.controller import KafkaClusterController

# Errors
from kafkalens.controllers.errors import (
    AuthTokenError,
    ClusterConnectionError,
    DeleteError,
    FetchError,
    GatewayError,
)

__all__ = [
    "AuthTokenError",
    # Base
    "BaseController",
    "ClusterConnectionError",
    "DeleteError",
    "FetchError",
    "GatewayError",
    # Domain Controllers
    "KafkaClusterController",
    "matches_prefix",
]
