"""Domain errors raised while reading front matter"""

from pathlib import Path
from typing import Optional


class MalformedHeader(ValueError):
    """Front matter block is unterminated, not valid YAML, or holds unsupported values."""

    def __init__(self, message: str, line: Optional[int] = None, path: Optional[Path] = None):
        super().__init__(message)
        self.message = message
        self.line = line        # 1-based line in the source file
        self.path = path

    def __str__(self) -> str:
        where = f"line {self.line}: " if self.line is not None else ""
        prefix = f"{self.path}: " if self.path is not None else ""
        return f"{prefix}{where}{self.message}"

    def with_path(self, path: Path) -> "MalformedHeader":
        """Return a copy of this error bound to the file it came from."""
        return MalformedHeader(self.message, line=self.line, path=path)
