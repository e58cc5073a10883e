from __future__ import annotations
from dataclasses import dataclass, field
from typing import List


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LLMConfig:
    """Configuration for the LLM client"""

    provider: str = field(default="gemini")
    config: dict = field(default_factory=dict)
    api_key: str = field(default="")

    def __post_init__(self):
        if not isinstance(self.provider, str) or not self.provider.strip():
            raise ValueError("Provider must be a non-empty string")
        if not isinstance(self.config, dict):
            raise ValueError("Config must be a dictionary")
        if not isinstance(self.api_key, str):
            raise ValueError("API key must be a string")


@dataclass
class TitleGeneratorConfig:
    """
    Top level configuration for the title generator.

    title_count only shapes the prompt; the number of titles returned by the
    model is never checked.
    """

    llm_config: LLMConfig = field(default_factory=LLMConfig)
    title_count: int = field(default=5)
    extra_credential_markers: List[str] = field(default_factory=list)
    log_level: str = field(default="INFO")

    def __post_init__(self):
        if not isinstance(self.llm_config, LLMConfig):
            raise TypeError("llm_config must be an LLMConfig instance")
        if (
            isinstance(self.title_count, bool)
            or not isinstance(self.title_count, int)
            or self.title_count <= 0
        ):
            raise ValueError("title_count must be a positive integer")
        for marker in self.extra_credential_markers:
            if not isinstance(marker, str) or not marker.strip():
                raise ValueError("Credential markers must be non-empty strings")
        if not isinstance(self.log_level, str):
            raise ValueError("log_level must be a string")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
