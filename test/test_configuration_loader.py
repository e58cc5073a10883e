"""Tests for configuration models and JSON loading."""

import json
from pathlib import Path

import pytest

from config.domain.models import LLMConfig, TitleGeneratorConfig
from config.infrastructure.json import ConfigurationLoader


class TestTitleGeneratorConfig:
    def test_defaults(self):
        config = TitleGeneratorConfig()

        assert config.llm_config.provider == "gemini"
        assert config.title_count == 5
        assert config.extra_credential_markers == []
        assert config.log_level == "INFO"

    def test_log_level_is_normalised(self):
        assert TitleGeneratorConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"title_count": 0},
            {"title_count": True},
            {"log_level": "loud"},
            {"extra_credential_markers": ["  "]},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            TitleGeneratorConfig(**kwargs)

    def test_llm_config_type(self):
        with pytest.raises(TypeError):
            TitleGeneratorConfig(llm_config={"provider": "gemini"})

    def test_empty_provider(self):
        with pytest.raises(ValueError):
            LLMConfig(provider=" ")


class TestConfigurationLoader:
    def test_from_dict(self):
        config = ConfigurationLoader.from_dict(
            {
                "llm": {"provider": "gemini", "config": {"model": "gemini-2.5-pro"}},
                "title_count": 3,
                "extra_credential_markers": ["API key not valid"],
                "log_level": "warning",
            }
        )

        assert config.llm_config.config == {"model": "gemini-2.5-pro"}
        assert config.title_count == 3
        assert config.extra_credential_markers == ["API key not valid"]
        assert config.log_level == "WARNING"

    def test_missing_sections_use_defaults(self):
        assert ConfigurationLoader.from_dict({}) == TitleGeneratorConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            ConfigurationLoader.load_from_file(tmp_path / "missing.json")

    def test_save_and_load_without_api_key(self, tmp_path):
        config = TitleGeneratorConfig(
            llm_config=LLMConfig(config={"temperature": 0.9}, api_key="secret"),
            title_count=7,
        )
        path = tmp_path / "nested" / "config.json"

        ConfigurationLoader.save_to_file(config, path)

        assert "secret" not in path.read_text(encoding="utf-8")
        loaded = ConfigurationLoader.load_from_file(path)
        assert loaded.title_count == 7
        assert loaded.llm_config.config == {"temperature": 0.9}
        assert loaded.llm_config.api_key == ""

    def test_example_config_loads(self):
        path = Path(__file__).resolve().parent.parent / "example_config.json"

        config = ConfigurationLoader.load_from_file(path)

        assert config.llm_config.config["model"] == "gemini-2.5-flash"
        assert json.loads(path.read_text(encoding="utf-8"))["title_count"] == 5
