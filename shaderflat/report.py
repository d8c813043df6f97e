"""Summarize one preprocessing run as JSON-serializable data.

The report lists every include occurrence in the order it was spliced and
aggregates them per canonical path:

    {
      "root": "a.glsl",
      "output_bytes": 123,
      "declares_once": false,
      "files": [{"path": ..., "occurrences": ..., "spliced": ...,
                 "deduplicated": ..., "max_depth": ..., "bytes": ...}],
      "inclusions": [{"path": ..., "includer": ..., "depth": ...,
                      "spliced": ..., "size": ...}]
    }
"""

import json
from dataclasses import asdict
from pathlib import Path

from .preprocessor import PreprocessResult
from .session import Session


def summarize_files(session: Session) -> list[dict]:
    """Aggregate the inclusion log per canonical path, sorted by path."""
    files: dict[str, dict] = {}
    for inclusion in session.inclusions:
        entry = files.setdefault(
            inclusion.path,
            {
                "path": inclusion.path,
                "occurrences": 0,
                "spliced": 0,
                "deduplicated": 0,
                "max_depth": 0,
                "bytes": 0,
            },
        )
        entry["occurrences"] += 1
        if inclusion.spliced:
            entry["spliced"] += 1
        else:
            entry["deduplicated"] += 1
        entry["max_depth"] = max(entry["max_depth"], inclusion.depth)
        entry["bytes"] += inclusion.size
    return [files[path] for path in sorted(files)]


def build_report(session: Session, result: PreprocessResult, root: str) -> dict:
    return {
        "root": root,
        "output_bytes": len(result.text.encode("utf-8")),
        "declares_once": result.declares_once,
        "files": summarize_files(session),
        "inclusions": [asdict(inclusion) for inclusion in session.inclusions],
    }


def write_report(report: dict, output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(report, indent=2) + "\n", encoding="utf-8")
