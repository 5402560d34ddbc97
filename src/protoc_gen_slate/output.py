"""Generated documents and their persistence."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

from .log import get_logger

LOGGER = get_logger("output")


@dataclass(frozen=True)
class GeneratedDocument:
    """Rendered text and the path it is written to, relative to the output root."""

    path: str
    text: str
    mode: int | None = None


def write_documents(documents: Iterable[GeneratedDocument], root: str | Path) -> list[Path]:
    """Write *documents* below *root* and return the written paths."""
    root_path = Path(root)
    written: list[Path] = []
    for document in documents:
        output_path = root_path / document.path
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document.text, encoding="utf-8")
        if document.mode is not None:
            output_path.chmod(document.mode)
        LOGGER.info("wrote %s", output_path)
        written.append(output_path)
    return written
