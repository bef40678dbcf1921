import csv
import io
import logging
from pathlib import Path
from typing import Iterable, List, Optional, Sequence, TextIO

from . import config
from .exceptions import ExportError
from .models import VideoRecord


class CatalogExporter:
    """
    Writes the visible records as CSV.

    Every field is double-quoted with embedded quotes doubled, and every row
    (header included) ends with a bare newline.
    """

    def __init__(self, columns: Optional[Sequence[str]] = None):
        self.columns: List[str] = list(columns) if columns is not None else list(config.EXPORT_COLUMNS)
        unknown = [c for c in self.columns if c not in config.EXPORT_COLUMNS]
        if unknown:
            raise ExportError(f"Unknown export columns: {', '.join(unknown)}")

    def write(self, records: Iterable[VideoRecord], out: TextIO) -> int:
        writer = csv.writer(out, quoting=csv.QUOTE_ALL, lineterminator="\n")
        writer.writerow(self.columns)

        count = 0
        for rec in records:
            writer.writerow(rec.as_row(self.columns))
            count += 1
        return count

    def dumps(self, records: Iterable[VideoRecord]) -> str:
        buf = io.StringIO()
        self.write(records, buf)
        return buf.getvalue()

    def write_csv(self, records: Iterable[VideoRecord], output_csv: Path) -> int:
        """
        Exports to output_csv and returns the number of data rows written.
        """
        output_csv = Path(output_csv)
        logging.info(f"Exporting catalog -> {output_csv}")
        tmp = output_csv.with_name(output_csv.name + ".tmp")
        try:
            output_csv.parent.mkdir(parents=True, exist_ok=True)
            # surrogateescape writes undecodable file names back as their original bytes
            with tmp.open("w", newline="", encoding="utf-8", errors="surrogateescape") as f:
                count = self.write(records, f)
            tmp.replace(output_csv)
        except (OSError, UnicodeError) as e:
            if tmp.exists():
                tmp.unlink()
            raise ExportError(f"Could not write {output_csv}: {e}") from e

        logging.info(f"Export complete. Wrote {count} rows.")
        return count
