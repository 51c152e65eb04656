"""Output sink: persist report artifacts as JSON and text files."""

from __future__ import annotations

import json
from pathlib import Path

from selector_usage.model.report import Report


class ReportWriter:
    """Writes ``<prefix>-<name>.json`` per list artifact and ``<prefix>-summary.txt``.

    Nothing is written until a complete report exists, so an aborted run
    leaves the output directory untouched.
    """

    def __init__(self, output_dir: str | Path, prefix: str = "") -> None:
        self._output_dir = Path(output_dir)
        self._prefix = prefix

    def path_for(self, name: str, suffix: str) -> Path:
        stem = f"{self._prefix}-{name}" if self._prefix else name
        return self._output_dir / f"{stem}{suffix}"

    def write(self, report: Report) -> list[Path]:
        """Write all six artifacts; return the paths in artifact order."""
        self._output_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for name, data in report.artifacts().items():
            if name == "summary":
                path = self.path_for(name, ".txt")
                path.write_text(data, encoding="utf-8")
            else:
                path = self.path_for(name, ".json")
                path.write_text(json.dumps(data, indent="\t", ensure_ascii=False), encoding="utf-8")
            written.append(path)
        return written
