"""Symbol entry model."""

from dataclasses import dataclass
from typing import Dict, Any


@dataclass(frozen=True)
class SymbolEntry:
    """A single parsed symbol: its name, declared resource type and raw value."""

    name: str
    type: str
    value: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to dictionary."""
        return {
            "name": self.name,
            "type": self.type,
            "value": self.value
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SymbolEntry":
        """Create entry from dictionary."""
        return cls(name=data["name"], type=data["type"], value=data["value"])
