"""Running statistics for a scanning session."""

from pydantic import BaseModel, Field

from orthopy.core.types import ErrorKind


class SessionStatistics(BaseModel):
    """Counters shown to the user while a document is being checked."""

    word_count: int = Field(0, ge=0)
    line_count: int = Field(0, ge=0)
    char_count: int = Field(0, ge=0)
    bytes_read: int = Field(0, ge=0)
    total_bytes: int = Field(0, ge=0)
    progress: float = Field(0.0, ge=0)
    error_counts: dict[str, int] = Field(
        default_factory=lambda: {kind.value: 0 for kind in ErrorKind}
    )

    def record_error(self, kind: ErrorKind) -> None:
        self.error_counts[kind.value] = self.error_counts.get(kind.value, 0) + 1

    def error_count(self, kind: ErrorKind) -> int:
        return self.error_counts.get(kind.value, 0)

    def record_line(self, line: str, words: int) -> None:
        """Count a line that has been written to the output."""
        self.line_count += 1
        self.char_count += len(line)
        self.word_count += words
        self.update_progress(line)

    def update_progress(self, line: str) -> float:
        """Advance ``bytes_read`` by the line's size and recompute progress."""
        self.bytes_read += len(line.encode("utf-8"))
        if self.total_bytes:
            self.progress = self.bytes_read / self.total_bytes * 100
        return self.progress

    def complete(self) -> None:
        self.progress = 100.0
