from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Optional

from ..utils.json_pointer import split_path, join_path


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based
    column: Optional[int] = None  # 1-based


def lookup_source(
    source_map: Optional[Dict[str, Dict[str, int]]],
    yaml_path: Optional[str],
    file_path: Optional[Path] = None,
) -> SourceLocation:
    """Find the closest recorded location for ``yaml_path``.

    A missing field has no node of its own, so the lookup falls back to the
    nearest ancestor that exists in the document.
    """
    if not source_map or yaml_path is None:
        return SourceLocation(file_path=file_path, yaml_path=yaml_path)

    tokens = split_path(yaml_path)
    while True:
        candidate = ""
        for token in tokens:
            candidate = join_path(candidate, token)
        entry = source_map.get(candidate)
        if entry:
            return SourceLocation(
                file_path=file_path,
                yaml_path=yaml_path,
                line=entry.get("line"),
                column=entry.get("column"),
            )
        if not tokens:
            return SourceLocation(file_path=file_path, yaml_path=yaml_path)
        tokens = tokens[:-1]


def display_path(path: Path, source_root: Optional[str]) -> str:
    if not source_root:
        return str(path)

    try:
        return str(path.resolve().relative_to(Path(source_root).resolve()))
    except ValueError:
        return str(path)


def format_source(loc: Optional[SourceLocation], source_root: Optional[str] = None) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        file_path = display_path(loc.file_path, source_root)
        if loc.line is not None and loc.column is not None:
            parts.append(f"source= {file_path}:{loc.line}:{loc.column} ")
        elif loc.line is not None:
            parts.append(f"source= {file_path}:{loc.line} ")
        else:
            parts.append(f"source= {file_path} ")

    if loc.yaml_path:
        parts.append(f"path={loc.yaml_path}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
