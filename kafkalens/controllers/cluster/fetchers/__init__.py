"""Fetchers issuing the individual cluster requests."""

from kafkalens.controllers.cluster.fetchers.group_fetcher import GroupFetcher
from kafkalens.controllers.cluster.fetchers.metadata_fetcher import MetadataFetcher
from kafkalens.controllers.cluster.fetchers.watermark_fetcher import WatermarkFetcher

__all__ = ["GroupFetcher", "MetadataFetcher", "WatermarkFetcher"]
