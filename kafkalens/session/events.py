"""Key events fed into the session state machine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyEvent:
    """One key press.

    ``key`` is the Textual key name ("enter", "up", "ctrl+c", "a", ...).
    ``character`` is the printable character produced, if any.
    """

    key: str
    character: str | None = None

    @classmethod
    def char(cls, character: str) -> KeyEvent:
        """Build the event for a single printable character."""
        key = "space" if character == " " else character
        return cls(key=key, character=character)

    @property
    def is_printable(self) -> bool:
        return (
            self.character is not None
            and len(self.character) == 1
            and self.character.isprintable()
        )
