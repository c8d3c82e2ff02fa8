"""Consumer group models."""

from pydantic import BaseModel


class ConsumerGroupSummary(BaseModel):
    """One consumer group tracked by the cluster."""

    name: str
    state: str = "Unknown"
