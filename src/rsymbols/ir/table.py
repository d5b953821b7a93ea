"""Two-key symbol storage."""

from typing import Dict, Iterator, Optional, Set, Tuple, Any
from collections import Counter

from .entry import SymbolEntry


class SymbolTable:
    """Symbols indexed by owning class (row) and symbol name (column).

    At most one entry is held per (class_name, name) pair; putting the same
    pair again replaces the previous entry.
    """

    def __init__(self) -> None:
        self._rows: Dict[str, Dict[str, SymbolEntry]] = {}

    def put(self, class_name: str, name: str, entry: SymbolEntry) -> None:
        """Store an entry, replacing any entry already at this key."""
        self._rows.setdefault(class_name, {})[name] = entry

    def lookup(self, class_name: str, name: str) -> Optional[SymbolEntry]:
        """Get the entry for a class and symbol name."""
        row = self._rows.get(class_name)
        if row is None:
            return None
        return row.get(name)

    def contains(self, class_name: str, name: str) -> bool:
        """Check whether an entry exists for a class and symbol name."""
        return self.lookup(class_name, name) is not None

    def __contains__(self, key: Tuple[str, str]) -> bool:
        class_name, name = key
        return self.contains(class_name, name)

    def rows(self) -> Set[str]:
        """Get set of all owning class names."""
        return set(self._rows.keys())

    def entries_for(self, class_name: str) -> Dict[str, SymbolEntry]:
        """Get all entries of one class, keyed by symbol name."""
        return dict(self._rows.get(class_name, {}))

    def columns(self) -> Set[str]:
        """Get set of all symbol names across every class."""
        return {name for row in self._rows.values() for name in row}

    def column(self, name: str) -> Dict[str, SymbolEntry]:
        """Get every entry with the given symbol name, keyed by class name."""
        return {
            class_name: row[name]
            for class_name, row in self._rows.items()
            if name in row
        }

    def cells(self) -> Iterator[Tuple[str, str, SymbolEntry]]:
        """Iterate over (class_name, name, entry) for every stored entry."""
        for class_name, row in self._rows.items():
            for name, entry in row.items():
                yield class_name, name, entry

    def __len__(self) -> int:
        return sum(len(row) for row in self._rows.values())

    def is_empty(self) -> bool:
        """Check whether the table holds no entries."""
        return not self._rows

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        """Convert table to a nested class -> name -> entry dictionary."""
        return {
            class_name: {name: entry.to_dict() for name, entry in row.items()}
            for class_name, row in self._rows.items()
        }

    def get_stats(self) -> Dict[str, Any]:
        """Get statistics about stored symbols."""
        by_type = Counter(entry.type for _, _, entry in self.cells())

        return {
            "total_entries": len(self),
            "classes": len(self._rows),
            "types": len(by_type),
            "by_type": dict(by_type)
        }
