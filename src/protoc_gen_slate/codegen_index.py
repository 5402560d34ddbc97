"""Aggregated index with Slate front matter.

The index lists every generated document, so it is only complete when the
plugin sees all files in a single invocation (protoc default, or buf with
``strategy: all``). A per-directory strategy runs the plugin several times
and each run overwrites the index with its own batch.
"""

from __future__ import annotations

from typing import Iterable, Sequence

import yaml

from .errors import SerializationError
from .log import get_logger
from .output import GeneratedDocument

LOGGER = get_logger("index")

INDEX_FILE_MODE = 0o644
FRONT_MATTER_DELIMITER = "---\n"


def collect_includes(documents: Iterable[GeneratedDocument]) -> list[str]:
    """Return the distinct document paths in lexicographic order."""
    return sorted({document.path for document in documents})


def render_front_matter(includes: Sequence[str], languages: Sequence[str]) -> str:
    """Serialize the index front matter wrapped in ``---`` delimiters."""
    front_matter = {
        "Includes": list(includes),
        "language_tabs": list(languages),
        "Search": True,
        "code_clipboard": True,
    }
    try:
        body = yaml.safe_dump(front_matter, sort_keys=False, default_flow_style=False)
    except yaml.YAMLError as err:
        raise SerializationError(f"cannot encode index front matter: {err}") from err
    return f"{FRONT_MATTER_DELIMITER}{body}{FRONT_MATTER_DELIMITER}"


def generate_index(
    documents: Iterable[GeneratedDocument], index_path: str, languages: Sequence[str]
) -> GeneratedDocument:
    """Build the index document for *documents*."""
    includes = collect_includes(documents)
    LOGGER.debug("index %s includes %d document(s)", index_path, len(includes))
    return GeneratedDocument(
        path=index_path,
        text=render_front_matter(includes, languages),
        mode=INDEX_FILE_MODE,
    )
