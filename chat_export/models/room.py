"""
Chat room model.
"""

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ChatRoom:
    """A named chat channel as seen by the export endpoint."""
    name: str
    private: bool = False
    closed: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ChatRoom':
        return cls(
            name=data["name"],
            private=bool(data.get("private", False)),
            closed=bool(data.get("closed", False)),
        )
