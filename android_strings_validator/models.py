"""
Core data models for the Android Strings Validator.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class StringEntry:
    """A <string> resource."""
    name: str
    value: str


@dataclass
class StringArrayEntry:
    """A <string-array> resource with its ordered items."""
    name: str
    items: List[str] = field(default_factory=list)


@dataclass
class PluralItem:
    """One quantity variant of a <plurals> resource."""
    quantity: str
    value: str


@dataclass
class PluralEntry:
    """A <plurals> resource with its quantity-tagged variants."""
    name: str
    items: List[PluralItem] = field(default_factory=list)


@dataclass
class ResourceDocument:
    """
    Resources parsed from one locale's strings file.

    Entries are kept in document order. Names are not required to be
    unique; every lookup returns the first entry with the requested name.
    """
    strings: List[StringEntry] = field(default_factory=list)
    string_arrays: List[StringArrayEntry] = field(default_factory=list)
    plurals: List[PluralEntry] = field(default_factory=list)

    def find_string(self, name: str) -> Optional[StringEntry]:
        return _first_named(self.strings, name)

    def find_string_array(self, name: str) -> Optional[StringArrayEntry]:
        return _first_named(self.string_arrays, name)

    def find_plural(self, name: str) -> Optional[PluralEntry]:
        return _first_named(self.plurals, name)

    def duplicate_names(self) -> Dict[str, Dict[str, int]]:
        """
        Names defined more than once, per entry kind.

        Returns:
            Mapping of kind ("string", "string-array", "plurals") to
            {name: occurrence count}, in order of first appearance.
            Kinds without duplicates are omitted.
        """
        duplicates = {}
        for kind, entries in (
            ("string", self.strings),
            ("string-array", self.string_arrays),
            ("plurals", self.plurals),
        ):
            counts = Counter(entry.name for entry in entries)
            repeated = {name: count for name, count in counts.items() if count > 1}
            if repeated:
                duplicates[kind] = repeated
        return duplicates

    @property
    def entry_count(self) -> int:
        return len(self.strings) + len(self.string_arrays) + len(self.plurals)


def _first_named(entries, name):
    for entry in entries:
        if entry.name == name:
            return entry
    return None
