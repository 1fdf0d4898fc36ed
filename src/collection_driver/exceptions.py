"""
Exceptions raised by the collection driver itself.
Errors reported by the MongoDB driver are never wrapped; they propagate as-is.
"""

from typing import Any, Dict


class InvalidIdError(Exception):
    """Raised when an entity id is not a 24 character hex string."""

    def __init__(self, id: Any = None, message=None):
        self.id = id
        self.message = message or "invalid id"
        self.error: Dict[str, str] = {"error": self.message}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, str]:
        return dict(self.error)
