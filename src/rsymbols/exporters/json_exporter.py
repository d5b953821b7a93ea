"""JSON exporter for symbol tables."""

from pathlib import Path
import json

from rsymbols.ir import SymbolTable


class JSONExporter:
    """Export a symbol table to JSON format."""

    def export(self, table: SymbolTable, output_path: Path) -> None:
        """Export table to JSON file."""
        data = {
            "metadata": table.get_stats(),
            "symbols": table.to_dict()
        }

        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
