"""
Import resolution for Solidity sources.

solc's standard-JSON interface has no file system access of its own when
sources are passed as content, so every imported unit must be collected
up front. Resolution tries the import path as written, then the same path
next to the entry source, then under the dependency directory
(``node_modules`` by default, where npm packages such as
``@openzeppelin/contracts`` live).

Units that cannot be found are left out of the source map; solc then
reports them as compilation diagnostics.
"""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

NOT_FOUND = "File not found"

# String literals are kept so that "//" inside a path is not mistaken
# for a comment.
_COMMENT_RE = re.compile(
    r"(\"(?:\\.|[^\"\\])*\"|'(?:\\.|[^'\\])*')|//[^\n]*|/\*.*?\*/",
    re.DOTALL,
)

# import "p"; import "p" as X; import * as X from "p"; import {a, b as c} from "p";
_IMPORT_RE = re.compile(
    r"\bimport\s+(?:[^;\"']*?\bfrom\s+)?[\"']([^\"']+)[\"']",
)


@dataclass(frozen=True)
class ImportResult:
    contents: Optional[str] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.contents is not None


Resolver = Callable[[str], ImportResult]


def find_import(
    path: str,
    dependency_dir: Path | str = "node_modules",
    base_dir: Optional[Path | str] = None,
) -> ImportResult:
    """
    Resolve one import path to its source text.

    Args:
        path: Import path as written in the source (or normalised)
        dependency_dir: Fallback root for package imports
        base_dir: Directory of the entry source, tried after the literal
            path when the entry does not live in the working directory

    Returns:
        ImportResult with ``contents`` set, or ``error`` set when
        no candidate path exists.
    """
    candidates = [Path(path)]
    if base_dir is not None and Path(base_dir) != Path("."):
        candidates.append(Path(base_dir) / path)
    candidates.append(Path(dependency_dir) / path)

    for candidate in candidates:
        if candidate.is_file():
            return ImportResult(contents=candidate.read_text(encoding="utf-8"))
    return ImportResult(error=NOT_FOUND)


def make_resolver(
    dependency_dir: Path | str = "node_modules",
    base_dir: Optional[Path | str] = None,
) -> Resolver:
    def resolver(path: str) -> ImportResult:
        return find_import(path, dependency_dir, base_dir=base_dir)

    return resolver


def strip_comments(source: str) -> str:
    return _COMMENT_RE.sub(lambda m: m.group(1) or "", source)


def parse_imports(source: str) -> list[str]:
    """Return import paths in the order they appear, comments ignored."""
    return _IMPORT_RE.findall(strip_comments(source))


def normalize_import(path: str, importer: str) -> str:
    """Map an import path to the source unit name solc will look up."""
    if path.startswith("./") or path.startswith("../"):
        base = posixpath.dirname(importer)
        return posixpath.normpath(posixpath.join(base, path))
    return path


def collect_sources(
    entry_name: str,
    content: str,
    resolver: Resolver,
) -> tuple[dict[str, dict[str, str]], list[str]]:
    """
    Build a standard-JSON ``sources`` map for an entry file.

    Walks import directives transitively, resolving each unit once.

    Args:
        entry_name: Virtual filename of the entry source
        content: Entry source text
        resolver: Callable mapping an import path to an ImportResult

    Returns:
        (sources, missing): the source map and the unit names the
        resolver could not find.
    """
    sources: dict[str, dict[str, str]] = {entry_name: {"content": content}}
    missing: list[str] = []
    pending = [entry_name]

    while pending:
        unit = pending.pop(0)
        for raw in parse_imports(sources[unit]["content"]):
            name = normalize_import(raw, unit)
            if name in sources or name in missing:
                continue
            result = resolver(name)
            if not result.found:
                missing.append(name)
                continue
            sources[name] = {"content": result.contents}
            pending.append(name)

    return sources, missing
