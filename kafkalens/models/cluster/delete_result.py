"""Per-entity outcome of an admin delete call."""

from pydantic import BaseModel


class DeleteOutcome(BaseModel):
    """Result of deleting one topic or group.

    ``error`` is None when the entity was deleted.
    """

    name: str
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def failed_outcomes(outcomes: list[DeleteOutcome]) -> list[DeleteOutcome]:
    """Return the outcomes that carry an error, preserving order."""
    return [outcome for outcome in outcomes if not outcome.ok]


def format_failures(outcomes: list[DeleteOutcome]) -> str:
    """Render failing outcomes as one ``name: reason`` line each."""
    return "\n".join(
        f"{outcome.name}: {outcome.error}" for outcome in failed_outcomes(outcomes)
    )
