import json
from typing import Dict, Any
from pathlib import Path

from config.domain.models import LLMConfig, TitleGeneratorConfig


class ConfigurationLoader:
    """Loads and validates configuration from JSON files."""

    @staticmethod
    def load_from_file(file_path: Path) -> TitleGeneratorConfig:
        """Load configuration from JSON file."""
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return ConfigurationLoader.from_dict(data)

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> TitleGeneratorConfig:
        """Create TitleGeneratorConfig from dictionary."""
        if not isinstance(data, dict):
            raise ValueError("Configuration root must be a JSON object")

        llm_config = LLMConfig()
        if "llm" in data and data["llm"]:
            llm_config = ConfigurationLoader._load_llm_config(data["llm"])

        return TitleGeneratorConfig(
            llm_config=llm_config,
            title_count=data.get("title_count", 5),
            extra_credential_markers=list(data.get("extra_credential_markers", [])),
            log_level=data.get("log_level", "INFO"),
        )

    @staticmethod
    def _load_llm_config(llm_data: Dict[str, Any]) -> LLMConfig:
        """Load LLM configuration."""
        return LLMConfig(
            provider=llm_data.get("provider", "gemini"),
            config=llm_data.get("config", {}),
            api_key=llm_data.get("api_key", ""),
        )

    @staticmethod
    def save_to_file(config: TitleGeneratorConfig, file_path: Path) -> None:
        """Save configuration to JSON file. The API key is never written."""
        file_path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "llm": {
                "provider": config.llm_config.provider,
                "config": config.llm_config.config,
            },
            "title_count": config.title_count,
            "extra_credential_markers": config.extra_credential_markers,
            "log_level": config.log_level,
        }
        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
