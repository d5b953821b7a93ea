"""Unit tests for symbol entries and the symbol table."""

import dataclasses
import pytest

from rsymbols.ir import SymbolEntry, SymbolTable


class TestSymbolEntry:
    def test_accessors_return_values_unchanged(self):
        entry = SymbolEntry(" name ", "int[]", " 1 2 ")
        assert entry.name == " name "
        assert entry.type == "int[]"
        assert entry.value == " 1 2 "

    def test_entry_is_immutable(self):
        entry = SymbolEntry("foo", "int", "1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.value = "2"

    def test_dict_conversion(self):
        entry = SymbolEntry("foo", "int", "0x7f010000")
        assert entry.to_dict() == {"name": "foo", "type": "int", "value": "0x7f010000"}
        assert SymbolEntry.from_dict(entry.to_dict()) == entry


class TestSymbolTable:
    def setup_method(self):
        self.table = SymbolTable()
        self.table.put("id", "foo", SymbolEntry("foo", "int", "1"))
        self.table.put("id", "bar", SymbolEntry("bar", "int", "2"))
        self.table.put("string", "foo", SymbolEntry("foo", "int", "3"))
        self.table.put("styleable", "Toolbar", SymbolEntry("Toolbar", "int[]", "4 5"))

    def test_lookup(self):
        assert self.table.lookup("id", "foo").value == "1"
        assert self.table.lookup("string", "foo").value == "3"
        assert self.table.lookup("id", "missing") is None
        assert self.table.lookup("missing", "foo") is None

    def test_put_overwrites(self):
        self.table.put("id", "foo", SymbolEntry("foo", "int", "9"))
        assert self.table.lookup("id", "foo").value == "9"
        assert len(self.table) == 4

    def test_rows_and_entries_for(self):
        assert self.table.rows() == {"id", "string", "styleable"}
        assert set(self.table.entries_for("id")) == {"foo", "bar"}
        assert self.table.entries_for("missing") == {}

    def test_entries_for_is_a_copy(self):
        self.table.entries_for("id").clear()
        assert self.table.lookup("id", "foo") is not None

    def test_columns(self):
        assert self.table.columns() == {"foo", "bar", "Toolbar"}
        column = self.table.column("foo")
        assert set(column) == {"id", "string"}
        assert column["string"].value == "3"

    def test_contains(self):
        assert ("id", "foo") in self.table
        assert ("id", "baz") not in self.table
        assert self.table.contains("styleable", "Toolbar")

    def test_cells(self):
        cells = {(class_name, name) for class_name, name, _ in self.table.cells()}
        assert cells == {("id", "foo"), ("id", "bar"), ("string", "foo"), ("styleable", "Toolbar")}

    def test_stats(self):
        stats = self.table.get_stats()
        assert stats["total_entries"] == 4
        assert stats["classes"] == 3
        assert stats["by_type"] == {"int": 3, "int[]": 1}

    def test_to_dict(self):
        data = self.table.to_dict()
        assert data["styleable"]["Toolbar"] == {"name": "Toolbar", "type": "int[]", "value": "4 5"}

    def test_empty_table(self):
        table = SymbolTable()
        assert table.is_empty()
        assert len(table) == 0
        assert list(table.cells()) == []
