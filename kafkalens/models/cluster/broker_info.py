"""Broker models."""

from pydantic import BaseModel


class BrokerSummary(BaseModel):
    """One broker of the cluster."""

    id: int
    host: str
    port: int

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"
