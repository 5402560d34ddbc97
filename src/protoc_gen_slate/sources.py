"""Access to the verbatim schema sources."""

from __future__ import annotations

from pathlib import Path

from .errors import SourceReadError


class SourceTree:
    """Schema sources rooted at a fixed directory.

    Parameters
    ----------
    root:
        Directory the compiler's input paths are relative to.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)

    def read(self, input_path: str) -> str:
        """Return the text of the schema file declared as *input_path*."""
        path = self.root / input_path
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as err:
            raise SourceReadError(f"cannot read schema source '{path}': {err}") from err
