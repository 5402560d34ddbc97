"""Documentation pipeline: descriptor graph in, Markdown documents out."""

from __future__ import annotations

from typing import Sequence

from .codegen_examples import LanguageRegistry, default_registry
from .codegen_index import generate_index
from .codegen_markdown import build_units, render_document
from .config import SlateOptions
from .log import get_logger
from .model import Package
from .output import GeneratedDocument
from .sources import SourceTree

LOGGER = get_logger("generator")


def generate(
    packages: Sequence[Package],
    options: SlateOptions,
    registry: LanguageRegistry | None = None,
) -> list[GeneratedDocument]:
    """Render every package of *packages* and, if configured, the index.

    The language list is checked before anything is rendered; any error
    aborts the whole run.
    """
    if registry is None:
        registry = default_registry(SourceTree(options.source_dir))
    registry.check(options.languages)

    documents = [
        render_document(
            unit,
            registry=registry,
            languages=options.languages,
            has_index=options.has_index,
        )
        for unit in build_units(packages, options.unit)
    ]
    LOGGER.info("rendered %d document(s)", len(documents))

    if options.index_path:
        documents.append(generate_index(documents, options.index_path, options.languages))
    return documents
