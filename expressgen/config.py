"""expressgen configuration.

Typed settings for the generator. Uses a Pydantic v2 model so values are
validated at construction time and can be overridden from environment
variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "templates"


class GeneratorConfig(BaseModel):
    """Global generator configuration.

    Created once by the CLI entry point and handed to the option resolver
    and the project generator.
    """

    template_dir: Path = Field(
        default=DEFAULT_TEMPLATE_DIR,
        description="Root directory of the bundled templates",
    )
    default_app_name: str = Field(
        default="hello-world",
        pattern=r"^[a-z0-9](?:[a-z0-9.-]*[a-z0-9.])?$",
        description="App name used when the destination yields no usable name",
    )
    dir_mode: int = Field(default=0o755, ge=0, le=0o7777)
    exec_mode: int = Field(default=0o755, ge=0, le=0o7777)

    @classmethod
    def from_env(cls) -> "GeneratorConfig":
        """Build a ``GeneratorConfig`` from environment variables.

        Recognised variables (all optional):
            EXPRESSGEN_TEMPLATE_DIR, EXPRESSGEN_DEFAULT_APP_NAME.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("EXPRESSGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["EXPRESSGEN_TEMPLATE_DIR"])
        if os.environ.get("EXPRESSGEN_DEFAULT_APP_NAME"):
            kwargs["default_app_name"] = os.environ["EXPRESSGEN_DEFAULT_APP_NAME"]
        return cls(**kwargs)
