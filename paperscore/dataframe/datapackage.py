"""Data packages: a metadata file plus a set of resource files."""

from __future__ import annotations

import json
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, TextIO


@dataclass(frozen=True)
class License:
    """A licence named in the package metadata."""

    name: str

    def to_json(self) -> dict[str, str]:
        return {"name": self.name}


COPYRIGHT_AUTHORS = License("copyright-authors")


class _Resource(Protocol):
    path: str
    description: str

    def write_content(self, stream: TextIO) -> None: ...


@dataclass
class DataResource:
    """A resource written as CSV from a data set."""

    path: str
    description: str
    data: Any

    def write_content(self, stream: TextIO) -> None:
        self.data.render_csv(stream, True)


@dataclass
class FileResource:
    """A resource copied from a local file."""

    path: str
    description: str
    local_path: str

    def write_content(self, stream: TextIO) -> None:
        with open(self.local_path, encoding="utf-8", newline="") as source:
            shutil.copyfileobj(source, stream)


@dataclass
class DataPackage:
    """A collection of resources with identifying metadata."""

    id: str = ""
    title: str = ""
    licenses: list[License] = field(default_factory=list)
    resources: list[_Resource] = field(default_factory=list)

    def add_resource(self, *resources: _Resource) -> None:
        self.resources.extend(resources)

    def metadata(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "licenses": [lic.to_json() for lic in self.licenses] or None,
            "resources": [
                {"path": r.path, "description": r.description} for r in self.resources
            ]
            or None,
        }

    def write(self, directory: str | Path) -> None:
        """Write the metadata and every resource under ``directory``."""
        base = Path(directory)
        base.mkdir(parents=True, exist_ok=True)
        with open(base / "dataset-metadata.json", "w", encoding="utf-8") as out:
            json.dump(self.metadata(), out, indent=2, sort_keys=True, ensure_ascii=False)
            out.write("\n")
        for resource in self.resources:
            path = base / resource.path
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(path, "w", encoding="utf-8", newline="") as out:
                resource.write_content(out)