"""Unit tests for GeneratorConfig (expressgen.config).

Tests cover:
- Defaults
- Validation of modes and the fallback app name
- from_env overrides
"""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from expressgen.config import DEFAULT_TEMPLATE_DIR, GeneratorConfig


class TestGeneratorConfig:
    @pytest.mark.unit
    def test_defaults(self):
        config = GeneratorConfig()
        assert config.template_dir == DEFAULT_TEMPLATE_DIR
        assert config.default_app_name == "hello-world"
        assert config.dir_mode == 0o755
        assert config.exec_mode == 0o755

    @pytest.mark.unit
    def test_default_template_dir_is_bundled(self):
        assert (DEFAULT_TEMPLATE_DIR / "js" / "app.js.j2").is_file()
        assert (DEFAULT_TEMPLATE_DIR / "js" / "www.js.j2").is_file()

    @pytest.mark.unit
    def test_empty_default_app_name_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(default_app_name="")

    @pytest.mark.unit
    def test_mode_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            GeneratorConfig(exec_mode=0o10000)

    @pytest.mark.unit
    def test_from_env_defaults(self, monkeypatch):
        monkeypatch.delenv("EXPRESSGEN_TEMPLATE_DIR", raising=False)
        monkeypatch.delenv("EXPRESSGEN_DEFAULT_APP_NAME", raising=False)
        config = GeneratorConfig.from_env()
        assert config == GeneratorConfig()

    @pytest.mark.unit
    def test_from_env_overrides(self, monkeypatch, tmp_path):
        monkeypatch.setenv("EXPRESSGEN_TEMPLATE_DIR", str(tmp_path))
        monkeypatch.setenv("EXPRESSGEN_DEFAULT_APP_NAME", "fallback-app")
        config = GeneratorConfig.from_env()
        assert config.template_dir == Path(tmp_path)
        assert config.default_app_name == "fallback-app"

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["My Bad_Name!", "-leading", "trailing-", "UPPER"])
    def test_invalid_default_app_name_rejected(self, name):
        with pytest.raises(ValidationError):
            GeneratorConfig(default_app_name=name)

    @pytest.mark.unit
    @pytest.mark.parametrize("name", ["hello-world", "app", "x.", "a.b-c1"])
    def test_npm_style_default_app_name_accepted(self, name):
        assert GeneratorConfig(default_app_name=name).default_app_name == name

    @pytest.mark.unit
    def test_from_env_invalid_app_name(self, monkeypatch):
        monkeypatch.setenv("EXPRESSGEN_DEFAULT_APP_NAME", "My Bad_Name!")
        with pytest.raises(ValidationError):
            GeneratorConfig.from_env()
