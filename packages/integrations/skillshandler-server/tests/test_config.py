"""Tests for the server configuration models and loader."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from skillshandler_core import DEFAULT_BASE_PATH, DEFAULT_CACHE_CONTROL
from skillshandler_server.config import (
    ProviderConfig,
    ServerConfig,
    load_config,
    resolve_env_vars,
)

# ------------------------------------------------------------------
# ProviderConfig model
# ------------------------------------------------------------------


class TestProviderConfig:
    def test_minimal(self):
        cfg = ProviderConfig(type="fs")
        assert cfg.type == "fs"
        assert cfg.options == {}

    def test_with_options(self):
        cfg = ProviderConfig(type="fs", options={"root": "/path/to/skills"})
        assert cfg.options["root"] == "/path/to/skills"

    @pytest.mark.parametrize("provider_type", ["fs", "static", "http"])
    def test_supported_types(self, provider_type):
        assert ProviderConfig(type=provider_type).type == provider_type

    def test_unknown_type_raises(self):
        with pytest.raises(ValidationError):
            ProviderConfig(type="s3")

    def test_missing_type_raises(self):
        with pytest.raises(ValidationError):
            ProviderConfig()  # type: ignore[call-arg]


# ------------------------------------------------------------------
# ServerConfig model
# ------------------------------------------------------------------


class TestServerConfig:
    def test_defaults(self):
        cfg = ServerConfig(providers=[ProviderConfig(type="fs")])
        assert cfg.base_path == DEFAULT_BASE_PATH
        assert cfg.cache_control == DEFAULT_CACHE_CONTROL
        assert cfg.cors == "*"
        assert cfg.verbose_logs is False

    def test_empty_providers_raises(self):
        with pytest.raises(ValidationError):
            ServerConfig(providers=[])

    def test_missing_providers_raises(self):
        with pytest.raises(ValidationError):
            ServerConfig()  # type: ignore[call-arg]

    def test_base_path_must_be_absolute(self):
        with pytest.raises(ValidationError, match="must start with '/'"):
            ServerConfig(base_path="skills", providers=[{"type": "fs"}])

    def test_cors_disabled(self):
        cfg = ServerConfig(cors=False, providers=[{"type": "fs"}])
        assert cfg.cors is False

    def test_cors_origin_list(self):
        cfg = ServerConfig(cors=["https://a.example"], providers=[{"type": "fs"}])
        assert cfg.cors == ["https://a.example"]

    def test_cors_true_rejected(self):
        with pytest.raises(ValidationError):
            ServerConfig(cors=True, providers=[{"type": "fs"}])

    def test_from_dict(self):
        data = {
            "base_path": "/skills",
            "verbose_logs": True,
            "providers": [
                {"type": "fs", "options": {"root": "./skills"}},
                {"type": "http", "options": {"base_url": "https://example.com"}},
            ],
        }
        cfg = ServerConfig(**data)
        assert cfg.base_path == "/skills"
        assert [p.type for p in cfg.providers] == ["fs", "http"]


# ------------------------------------------------------------------
# Environment variable resolution
# ------------------------------------------------------------------


class TestResolveEnvVars:
    def test_simple_string_replacement(self, monkeypatch):
        monkeypatch.setenv("MY_TOKEN", "secret123")
        assert resolve_env_vars("Bearer ${MY_TOKEN}") == "Bearer secret123"

    def test_multiple_vars_in_one_string(self, monkeypatch):
        monkeypatch.setenv("HOST", "example.com")
        monkeypatch.setenv("PORT", "8080")
        assert resolve_env_vars("https://${HOST}:${PORT}") == "https://example.com:8080"

    def test_unset_var_resolves_to_empty(self, monkeypatch, caplog):
        monkeypatch.delenv("NONEXISTENT_VAR_XYZ", raising=False)
        assert resolve_env_vars("x${NONEXISTENT_VAR_XYZ}y") == "xy"
        assert "NONEXISTENT_VAR_XYZ" in caplog.text

    def test_nested_structures(self, monkeypatch):
        monkeypatch.setenv("SECRET", "s3cret")
        data = {"a": {"b": ["${SECRET}", {"c": "${SECRET}"}]}}
        assert resolve_env_vars(data) == {"a": {"b": ["s3cret", {"c": "s3cret"}]}}

    def test_non_string_scalars_unchanged(self):
        assert resolve_env_vars({"n": 1, "f": 1.5, "b": False, "z": None}) == {
            "n": 1,
            "f": 1.5,
            "b": False,
            "z": None,
        }

    def test_does_not_mutate_input(self, monkeypatch):
        monkeypatch.setenv("X", "y")
        data = {"k": "${X}"}
        resolve_env_vars(data)
        assert data == {"k": "${X}"}


# ------------------------------------------------------------------
# Loading from disk
# ------------------------------------------------------------------


class TestLoadConfig:
    def test_json(self, tmp_path: Path):
        path = tmp_path / "server.json"
        path.write_text(json.dumps({"providers": [{"type": "fs", "options": {"root": "."}}]}))
        cfg = load_config(path)
        assert cfg.providers[0].options == {"root": "."}

    @pytest.mark.parametrize("suffix", [".yaml", ".yml"])
    def test_yaml(self, tmp_path: Path, suffix):
        path = tmp_path / f"server{suffix}"
        path.write_text(
            "base_path: /skills\n"
            "cors: false\n"
            "providers:\n"
            "  - type: fs\n"
            "    options:\n"
            "      root: ./skills\n"
        )
        cfg = load_config(path)
        assert cfg.base_path == "/skills"
        assert cfg.cors is False

    def test_env_vars_resolved(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("API_TOKEN", "t0ken")
        path = tmp_path / "server.yaml"
        path.write_text(
            "providers:\n"
            "  - type: http\n"
            "    options:\n"
            "      base_url: https://example.com\n"
            "      headers:\n"
            "        Authorization: Bearer ${API_TOKEN}\n"
        )
        cfg = load_config(path)
        assert cfg.providers[0].options["headers"] == {"Authorization": "Bearer t0ken"}

    def test_empty_file_is_invalid(self, tmp_path: Path):
        path = tmp_path / "server.yaml"
        path.write_text("")
        with pytest.raises(ValidationError):
            load_config(path)

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "missing.json")
