"""``package.json`` manifest for the generated project.

The manifest is built incrementally while feature flags are processed and
serialized once at the end of the run.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Version ranges written into generated manifests
# ---------------------------------------------------------------------------

DEPENDENCY_VERSIONS: dict[str, str] = {
    "debug": "~2.6.9",
    "express": "~4.16.1",
    "morgan": "~1.9.1",
    "cors": "^2.8.5",
    "cookie-parser": "~1.4.4",
    "pg": "^8.7.1",
    "dotenv": "^10.0.0",
    "nodemon": "^2.0.15",
    "jest": "^27.4.5",
    "supertest": "^6.1.6",
}


class Manifest(BaseModel):
    """In-memory ``package.json`` record.

    Every ``add_*`` method is keyed: writing an existing key replaces its
    value and keeps its position.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str
    version: str = "0.0.0"
    private: bool = True
    type: str = "module"
    scripts: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(
        default_factory=dict, alias="devDependencies"
    )

    def add_dependency(self, name: str, version_range: str | None = None) -> None:
        """Add a runtime dependency (version defaults to ``DEPENDENCY_VERSIONS``)."""
        self.dependencies[name] = version_range or DEPENDENCY_VERSIONS[name]

    def add_dev_dependency(self, name: str, version_range: str | None = None) -> None:
        """Add a development-only dependency."""
        self.dev_dependencies[name] = version_range or DEPENDENCY_VERSIONS[name]

    def add_script(self, name: str, command: str) -> None:
        """Add an npm script.  Scripts keep their insertion order."""
        self.scripts[name] = command

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest as ``package.json`` data.

        Dependency maps are sorted by package name like npm(1) does;
        scripts stay in insertion order.
        """
        return {
            "name": self.name,
            "version": self.version,
            "private": self.private,
            "type": self.type,
            "scripts": dict(self.scripts),
            "dependencies": dict(sorted(self.dependencies.items())),
            "devDependencies": dict(sorted(self.dev_dependencies.items())),
        }

    def serialize(self) -> str:
        """Return the canonical JSON text, ending with a single newline."""
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"


def new_manifest(name: str) -> Manifest:
    """Return the base manifest every generated project starts from."""
    manifest = Manifest(name=name)
    manifest.add_script("start", "node ./bin/www.js")
    manifest.add_dependency("debug")
    manifest.add_dependency("express")
    return manifest
