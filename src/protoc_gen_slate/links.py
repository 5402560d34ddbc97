"""Cross references between documented packages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .model import ProtoFile
from .names import lower_snake_case, upper_camel_case

WELL_KNOWN_NAMESPACE = "google"
_ANCHOR_SEGMENTS = 3


@dataclass(frozen=True)
class PackageLink:
    """Display name and in-document anchor of an imported file."""

    name: str
    url: str


def is_well_known(package: str) -> bool:
    """Whether *package* belongs to the reserved well-known types namespace."""
    return package == WELL_KNOWN_NAMESPACE or package.startswith(f"{WELL_KNOWN_NAMESPACE}.")


def file_anchor(proto_file: ProtoFile) -> str:
    """Return the ``#anchor`` for *proto_file*.

    The anchor is made of the last three package segments and the file stem,
    joined with hyphens and lower-cased. Distinct files may share an anchor
    when their trailing segments coincide.
    """
    segments = [part for part in lower_snake_case(proto_file.package).split(".") if part]
    parts = segments[-_ANCHOR_SEGMENTS:] + [proto_file.stem]
    return "#" + "-".join(parts).lower()


def package_links(imports: Iterable[ProtoFile]) -> list[PackageLink]:
    """Build links for *imports*, keeping their order and skipping well-known types."""
    links: list[PackageLink] = []
    seen: set[str] = set()
    for proto_file in imports:
        if is_well_known(proto_file.package) or proto_file.name in seen:
            continue
        seen.add(proto_file.name)
        links.append(PackageLink(name=upper_camel_case(proto_file.stem), url=file_anchor(proto_file)))
    return links
