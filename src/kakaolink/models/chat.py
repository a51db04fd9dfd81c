"""Chat message model produced by CSV ingestion."""

from pydantic import BaseModel, ConfigDict


class ChatMessage(BaseModel):
    """One row of a chat export. Fields are kept exactly as read (no trimming)."""

    model_config = ConfigDict(frozen=True)

    timestamp: str  # Raw value of the Date column, unparsed
    author: str
    text: str
    row: int | None = None  # 0-based data row in the source CSV, header excluded

    @property
    def is_eligible(self) -> bool:
        """True when all three fields are non-empty."""
        return bool(self.timestamp and self.author and self.text)
