"""Main scaffolding orchestrator.

Takes resolved ``ProjectOptions`` and generates an Express application
skeleton: directory tree, copied boilerplate, rendered ``app.js`` and
``bin/www.js``, and a ``package.json`` built from the feature flags.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from expressgen.config import GeneratorConfig
from expressgen.errors import UserAbort
from expressgen.utils import confirm as prompt_confirm

from .filesystem import FileSystem
from .manifest import Manifest, new_manifest
from .options import ProjectOptions
from .templates import TemplateRenderer, TemplateStore

CONFIRM_MESSAGE = "destination is not empty, continue? [y/N] "

TEST_SCRIPT = "node --experimental-vm-modules node_modules/jest/bin/jest.js"
CREATE_USERS_SCRIPT = "./db/scripts/users/createTable.js"


# ---------------------------------------------------------------------------
# app.js binding
# ---------------------------------------------------------------------------


class RouterMount(BaseModel):
    """A router mounted on the app with ``app.use(path, code)``."""

    model_config = ConfigDict(frozen=True)

    path: str
    code: str


class AppBinding(BaseModel):
    """Complete, frozen set of values rendered into ``app.js``."""

    model_config = ConfigDict(frozen=True)

    modules: dict[str, str] = Field(default_factory=dict)
    local_modules: dict[str, str] = Field(default_factory=dict)
    uses: tuple[str, ...] = ()
    mounts: tuple[RouterMount, ...] = ()
    view: bool = False

    def as_context(self) -> dict[str, Any]:
        return {
            "modules": dict(self.modules),
            "local_modules": dict(self.local_modules),
            "uses": list(self.uses),
            "mounts": list(self.mounts),
            "view": self.view,
        }


class AppBindingBuilder:
    """Collects ``app.js`` imports, middleware and mounts in order."""

    def __init__(self) -> None:
        self.modules: dict[str, str] = {}
        self.local_modules: dict[str, str] = {}
        self.uses: list[str] = []
        self.mounts: list[RouterMount] = []
        self.view = False

    def add_module(self, alias: str, source: str) -> "AppBindingBuilder":
        self.modules[alias] = source
        return self

    def add_local_module(self, alias: str, source: str) -> "AppBindingBuilder":
        self.local_modules[alias] = source
        return self

    def use(self, expression: str) -> "AppBindingBuilder":
        self.uses.append(expression)
        return self

    def mount(self, path: str, code: str) -> "AppBindingBuilder":
        self.mounts.append(RouterMount(path=path, code=code))
        return self

    def build(self) -> AppBinding:
        return AppBinding(
            modules=self.modules,
            local_modules=self.local_modules,
            uses=tuple(self.uses),
            mounts=tuple(self.mounts),
            view=self.view,
        )


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class GenerationResult(BaseModel):
    """What one generation run created, in creation order."""

    app_name: str
    destination: Path
    directories: list[Path] = Field(default_factory=list)
    files: list[Path] = Field(default_factory=list)
    manifest: Manifest


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class ProjectGenerator:
    """Main scaffolding orchestrator.

    Runs the stages below once, in order, for the given options:

    1. pre-check that the destination is empty, forced, or confirmed
    2. directory tree (``public/*``, ``models``/``db`` with ``pg``, ``routes``)
    3. boilerplate copies (stylesheets, routes, optional db/test/git files)
    4. manifest entries for each feature flag
    5. ``app.js``, ``package.json`` and the executable ``bin/www.js``

    Args:
        options: Resolved options for this run.
        config: Generator settings; defaults to ``GeneratorConfig()``.
        fs: Filesystem collaborator; defaults to :class:`FileSystem`.
        confirm: Callback asked before writing into a non-empty directory.
    """

    def __init__(
        self,
        options: ProjectOptions,
        config: GeneratorConfig | None = None,
        *,
        fs: FileSystem | None = None,
        confirm: Callable[[str], bool] | None = None,
    ) -> None:
        self.options = options
        self.config = config or GeneratorConfig()
        self.fs = fs or FileSystem()
        self.confirm = confirm or prompt_confirm
        self.store = TemplateStore(self.config.template_dir)
        self.renderer = TemplateRenderer(self.store)
        self.root = Path(options.destination)
        self._result: GenerationResult | None = None

    # -- Public API --------------------------------------------------------

    def generate(self) -> GenerationResult:
        """Generate the complete project structure.

        Returns:
            A ``GenerationResult`` listing created directories and files.

        Raises:
            UserAbort: If the destination is not empty and the user declines.
        """
        self.check_destination()

        manifest = self.build_manifest()
        binding = self.build_app_binding()
        self._result = GenerationResult(
            app_name=self.options.app_name,
            destination=self.root,
            manifest=manifest,
        )

        # 1. Directory tree
        self._create_directory_structure()

        # 2. Database layer
        if self.options.pg:
            self._copy_database_files()

        # 3. Smoke test
        if self.options.test:
            self._copy_template("js/app.test.js", self.root / "app.test.js")

        # 4. Stylesheets, routes and public files
        self._copy_template_multi("css", self.root / "public" / "css", "*.css")
        self._mkdir("routes")
        self._copy_template_multi("js/routes", self.root / "routes", "*.js")
        self._copy_template("js/index.html", self.root / "public" / "index.html")

        # 5. VCS ignore file
        if self.options.git:
            self._copy_template("js/gitignore", self.root / ".gitignore")

        self._copy_template("js/dirname.js", self.root / "dirname.js")

        # 6. Entry module, manifest and launcher
        self._write(
            self.root / "app.js",
            self.renderer.render_template("js/app.js.j2", binding.as_context()),
        )
        self._write(self.root / "package.json", manifest.serialize())
        self._mkdir("bin")
        self._write(
            self.root / "bin" / "www.js",
            self.renderer.render_template("js/www.js.j2", {"name": self.options.app_name}),
            mode=self.config.exec_mode,
        )

        return self._result

    def check_destination(self) -> None:
        """Verify the destination may be written to.

        Passes when the destination is missing or empty, when ``force`` is
        set, or when the user confirms.  Makes no filesystem changes.
        """
        if self.options.force or self._is_empty_directory():
            return
        if not self.confirm(CONFIRM_MESSAGE):
            raise UserAbort(self.options.destination)

    # -- Manifest ----------------------------------------------------------

    def build_manifest(self) -> Manifest:
        """Build ``package.json`` for the selected features.

        Features are applied in the order ``pg``, ``dev``, ``test``; a later
        feature writing the same script name wins.
        """
        opts = self.options
        manifest = new_manifest(opts.app_name)

        if opts.pg:
            manifest.add_dependency("pg")
            if opts.dev:
                manifest.add_script(
                    "db:createusers", f"node -r dotenv/config {CREATE_USERS_SCRIPT}"
                )
            else:
                manifest.add_script("db:createusers", f"node {CREATE_USERS_SCRIPT}")

        if opts.dev:
            manifest.add_dev_dependency("dotenv")
            manifest.add_dev_dependency("nodemon")
            manifest.add_script("dev", "nodemon -r dotenv/config ./bin/www.js")

        if opts.test:
            manifest.add_script("test", TEST_SCRIPT)
            manifest.add_dev_dependency("jest")
            manifest.add_dev_dependency("supertest")

        # Middleware packages imported by app.js
        manifest.add_dependency("morgan")
        manifest.add_dependency("cors")
        manifest.add_dependency("cookie-parser")
        return manifest

    # -- app.js binding ----------------------------------------------------

    def build_app_binding(self) -> AppBinding:
        """Assemble the imports, middleware and mounts of ``app.js``."""
        builder = AppBindingBuilder()

        # Request logger
        builder.add_module("logger", "morgan").use("logger('dev')")
        builder.add_module("cors", "cors").use("cors()")

        # Body parsers
        builder.use("express.json()")
        builder.use("express.urlencoded({ extended: false })")

        builder.add_module("cookieParser", "cookie-parser").use("cookieParser()")
        builder.add_module("__dirname", "./dirname.js")

        # User router
        builder.add_local_module("usersRouter", "./routes/users.js")
        builder.mount("/users", "usersRouter")

        # Static files
        builder.use('express.static(path.join(__dirname, "public"))')

        return builder.build()

    # -- Directory structure -----------------------------------------------

    def _create_directory_structure(self) -> None:
        if self.root != Path("."):
            self._mkdir(".")

        for directory in ("public", "public/js", "public/images", "public/css"):
            self._mkdir(directory)

        if self.options.pg:
            for directory in ("models", "db", "db/scripts", "db/scripts/users"):
                self._mkdir(directory)

    def _copy_database_files(self) -> None:
        files = [
            ("models/users.js", "models/users.js"),
            ("db/connection.js", "db/connection.js"),
            ("db/scripts/users/createTable.js", "db/scripts/users/createTable.js"),
        ]
        for template_name, output_name in files:
            self._copy_template(template_name, self.root / output_name)

    # -- Filesystem helpers ------------------------------------------------

    def _is_empty_directory(self) -> bool:
        try:
            return not self.fs.list_dir(self.root)
        except FileNotFoundError:
            return True

    def _mkdir(self, relative: str) -> None:
        path = self.fs.make_dir(self.root / relative, self.config.dir_mode)
        self._record(path, directory=True)

    def _write(self, path: Path, content: str, mode: int | None = None) -> None:
        self._record(self.fs.write(path, content, mode), directory=False)

    def _copy_template(self, name: str, target: Path) -> None:
        """Copy a literal template to *target*."""
        self._write(target, self.store.load(name))

    def _copy_template_multi(self, category_dir: str, target_dir: Path, pattern: str) -> None:
        """Copy every template in *category_dir* matching *pattern*."""
        for name in self.store.list_files(category_dir, pattern):
            self._copy_template(f"{category_dir}/{name}", target_dir / name)

    def _record(self, path: Path, *, directory: bool) -> None:
        if self._result is None:
            return
        if directory:
            self._result.directories.append(path)
        else:
            self._result.files.append(path)
