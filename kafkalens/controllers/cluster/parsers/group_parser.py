"""Consumer group parser."""

from __future__ import annotations

from typing import Any

from kafkalens.models.cluster.group_info import ConsumerGroupSummary


class GroupParser:
    """Parses consumer group listings into structured formats."""

    _STATE_WORD_SEPARATOR = "_"

    # Client enum names that differ from the broker protocol state names.
    _BROKER_STATE_NAMES = {
        "PREPARING_REBALANCING": "PreparingRebalance",
        "COMPLETING_REBALANCING": "CompletingRebalance",
    }

    def format_state(self, state: Any) -> str:
        """Render a group state enum (``STABLE``) as the broker names it (``Stable``)."""
        if state is None:
            return "Unknown"
        name = getattr(state, "name", None) or str(state)
        if name in self._BROKER_STATE_NAMES:
            return self._BROKER_STATE_NAMES[name]
        return "".join(
            word.capitalize()
            for word in name.split(self._STATE_WORD_SEPARATOR)
            if word
        )

    def parse_group(self, listing: Any) -> ConsumerGroupSummary:
        """Parse one ``ConsumerGroupListing``."""
        return ConsumerGroupSummary(
            name=listing.group_id,
            state=self.format_state(getattr(listing, "state", None)),
        )
