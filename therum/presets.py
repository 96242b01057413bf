"""Preset records, browsing, tag filtering and state files."""

from __future__ import annotations

import os
import xml.etree.ElementTree as ET
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class PresetState:
    name: str = "Init Patch"
    category: str = "Init"
    state: ET.Element = field(default_factory=lambda: ET.Element("PresetState"))


@dataclass
class PresetBrowserModel:
    presets: list[PresetState] = field(default_factory=list)

    def add_preset(self, preset: PresetState) -> None:
        self.presets.append(preset)

    def find_by_category(self, category: str) -> list[PresetState]:
        return [p for p in self.presets if p.category == category]


@dataclass
class PresetTagEntry:
    name: str
    category: str
    tags: list[str] = field(default_factory=list)


@dataclass
class PresetTagModel:
    entries: list[PresetTagEntry] = field(default_factory=list)

    def add(self, entry: PresetTagEntry) -> None:
        self.entries.append(entry)

    def __iter__(self) -> Iterator[PresetTagEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


class PresetBrowserFilter:
    """Selects entries by exact category and case-insensitive text."""

    def filter(
        self, entries: Iterable[PresetTagEntry], category: str, text: str
    ) -> list[PresetTagEntry]:
        needle = text.casefold()

        def matches(entry: PresetTagEntry) -> bool:
            if category and entry.category != category:
                return False
            if not text:
                return True
            return any(
                needle in hay.casefold()
                for hay in (entry.name, entry.category, " ".join(entry.tags))
            )

        return [e for e in entries if matches(e)]


def save_state_to_file(state: ET.Element, path: str | os.PathLike[str]) -> None:
    """Write ``state`` as an XML document to ``path``."""
    ET.ElementTree(state).write(path, encoding="utf-8", xml_declaration=True)


def load_state_from_file(path: str | os.PathLike[str]) -> ET.Element:
    """Read an XML state document; raise FileNotFoundError or ValueError."""
    if not os.path.isfile(path):
        raise FileNotFoundError(path)
    try:
        return ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise ValueError(f"not a valid state file: {os.fspath(path)}") from exc