"""CSV exporter for symbol tables."""

from pathlib import Path
import csv

from rsymbols.ir import SymbolTable


class CSVExporter:
    """Export a symbol table to a CSV file, one row per entry."""

    FIELDNAMES = ["class_name", "name", "type", "value"]

    def export(self, table: SymbolTable, output_path: Path) -> None:
        """Export table to CSV file."""
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=self.FIELDNAMES)
            writer.writeheader()

            for class_name, name, entry in table.cells():
                writer.writerow({
                    "class_name": class_name,
                    "name": name,
                    "type": entry.type,
                    "value": entry.value
                })
