"""Topic models: raw partition facts and the aggregated topic row."""

from pydantic import BaseModel, Field


class PartitionMetadataInfo(BaseModel):
    """Metadata of one partition as reported by the cluster."""

    partition_id: int
    replicas: list[int] = Field(default_factory=list)


class TopicMetadataInfo(BaseModel):
    """Metadata of one topic: its name and partition list."""

    name: str
    partitions: list[PartitionMetadataInfo] = Field(default_factory=list)


class WatermarkInfo(BaseModel):
    """Low/high offsets bounding the messages retained in a partition."""

    low: int
    high: int

    @property
    def retained(self) -> int:
        return self.high - self.low


class TopicSummary(BaseModel):
    """Topic-level statistics row."""

    name: str
    partitions: int = 0
    replication_factor: int = 0
    message_count: int = 0
    # Not computed. Always reported as 0.
    size_bytes: int = 0
