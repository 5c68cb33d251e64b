"""expressgen scaffolder -- generates Express application skeletons.

Quick usage::

    from expressgen.scaffolder import ProjectGenerator, resolve_options

    options = resolve_options("my-app", pg=True, dev=True)
    result = ProjectGenerator(options).generate()
"""

from expressgen.scaffolder.generator import (
    AppBinding,
    GenerationResult,
    ProjectGenerator,
)
from expressgen.scaffolder.manifest import Manifest, new_manifest
from expressgen.scaffolder.options import ProjectOptions, create_app_name, resolve_options
from expressgen.scaffolder.templates import TemplateRenderer, TemplateStore, to_source

__all__ = [
    "AppBinding",
    "GenerationResult",
    "Manifest",
    "ProjectGenerator",
    "ProjectOptions",
    "TemplateRenderer",
    "TemplateStore",
    "create_app_name",
    "new_manifest",
    "resolve_options",
    "to_source",
]
