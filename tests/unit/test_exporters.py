"""Unit tests for symbol table exporters."""

import csv
import json

from rsymbols.exporters import JSONExporter, CSVExporter
from rsymbols.loader import parse_lines


LINES = [
    "int id action_bar 2131230720",
    "int[] styleable Toolbar 2130771968 2130771969",
    "string app_name Hello World App",
]


class TestJSONExporter:
    def test_export(self, tmp_path):
        output_path = tmp_path / "out" / "R.json"
        JSONExporter().export(parse_lines(LINES), output_path)

        data = json.loads(output_path.read_text(encoding="utf-8"))
        assert data["metadata"]["total_entries"] == 3
        assert data["metadata"]["classes"] == 3
        assert data["symbols"]["styleable"]["Toolbar"]["value"] == "2130771968 2130771969"
        assert data["symbols"]["app_name"]["Hello"]["type"] == "string"


class TestCSVExporter:
    def test_export(self, tmp_path):
        output_path = tmp_path / "R.csv"
        CSVExporter().export(parse_lines(LINES), output_path)

        with open(output_path, newline="", encoding="utf-8") as f:
            rows = list(csv.DictReader(f))

        assert len(rows) == 3
        assert rows[0] == {
            "class_name": "id",
            "name": "action_bar",
            "type": "int",
            "value": "2131230720"
        }
        assert rows[2]["value"] == "World App"
