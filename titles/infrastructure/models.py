from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict

from google.genai import types


DYNAMIC_THINKING_BUDGET = -1


@dataclass
class ThinkingSettings:
    """
    How much reasoning Gemini may spend before writing the titles.

    A budget of 0 turns thinking off, -1 lets the model decide. Thinking
    tokens count against max_output_tokens, so a large budget can leave no
    room for the JSON answer.
    """

    thinking_budget: int = field(default=0)
    include_thoughts: bool = field(default=False)

    def __post_init__(self):
        if isinstance(self.thinking_budget, bool) or not isinstance(
            self.thinking_budget, int
        ):
            raise ValueError("thinking_budget must be an integer")
        if self.thinking_budget < DYNAMIC_THINKING_BUDGET:
            raise ValueError("thinking_budget must be -1 (dynamic), 0 (off) or positive")
        if not isinstance(self.include_thoughts, bool):
            raise ValueError("include_thoughts must be a boolean")

    def to_sdk(self) -> types.ThinkingConfig:
        return types.ThinkingConfig(
            thinking_budget=self.thinking_budget,
            include_thoughts=self.include_thoughts,
        )


@dataclass
class GeminiTitleSettings:
    """
    Sampling settings for the structured title request.

    The model id is not part of these settings; it travels with each
    GenerationRequest.
    """

    temperature: float = field(default=0.9)
    max_output_tokens: int = field(default=1024)
    thinking: ThinkingSettings = field(default_factory=ThinkingSettings)

    def __post_init__(self):
        if (
            not isinstance(self.temperature, (int, float))
            or not 0 <= self.temperature <= 2
        ):
            raise ValueError("Temperature must be a number between 0 and 2")
        if not isinstance(self.max_output_tokens, int) or self.max_output_tokens <= 0:
            raise ValueError("max_output_tokens must be a positive integer")
        if not isinstance(self.thinking, ThinkingSettings):
            raise ValueError("thinking must be a ThinkingSettings instance")
        if self.thinking.thinking_budget >= self.max_output_tokens:
            raise ValueError("thinking_budget must leave room within max_output_tokens")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GeminiTitleSettings:
        """Build settings from the provider ``config`` block of LLMConfig."""
        data = dict(data)
        data.pop("model", None)
        thinking = data.pop("thinking_config", None) or {}
        if not isinstance(thinking, dict):
            raise ValueError("thinking_config must be an object")
        unknown = set(data) - {"temperature", "max_output_tokens"}
        if unknown:
            raise ValueError(f"Unknown Gemini settings: {', '.join(sorted(unknown))}")
        return cls(thinking=ThinkingSettings(**thinking), **data)

    def to_generate_config(
        self, response_mime_type: str, response_schema: Dict[str, Any]
    ) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            response_mime_type=response_mime_type,
            response_schema=response_schema,
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
            thinking_config=self.thinking.to_sdk(),
        )
