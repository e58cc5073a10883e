from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


TITLES_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "titles": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
        },
    },
    "required": ["titles"],
}

JSON_MIME_TYPE = "application/json"
DEFAULT_MODEL = "gemini-2.5-flash"


class OutcomeKind(Enum):
    """Result categories of a title generation attempt."""

    SUCCESS = "success"
    VALIDATION_FAILURE = "validation_failure"
    CREDENTIAL_FAILURE = "credential_failure"
    UNKNOWN_FAILURE = "unknown_failure"


@dataclass(frozen=True)
class Outcome:
    """Base class for the result of one generation attempt. Not instantiated."""

    kind = OutcomeKind.UNKNOWN_FAILURE

    def __post_init__(self):
        if type(self) in (Outcome, Failure):
            raise TypeError(f"{type(self).__name__} is abstract, use a concrete outcome")

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS


@dataclass(frozen=True)
class Success(Outcome):
    titles: List[str] = field(default_factory=list)

    kind = OutcomeKind.SUCCESS


@dataclass(frozen=True)
class Failure(Outcome):
    """Any unsuccessful outcome; message is shown to the user as is."""

    message: str = ""


@dataclass(frozen=True)
class ValidationFailure(Failure):
    kind = OutcomeKind.VALIDATION_FAILURE


@dataclass(frozen=True)
class CredentialFailure(Failure):
    kind = OutcomeKind.CREDENTIAL_FAILURE


@dataclass(frozen=True)
class UnknownFailure(Failure):
    kind = OutcomeKind.UNKNOWN_FAILURE


@dataclass(frozen=True)
class GenerationRequest:
    """Everything sent to the generation service for one topic."""

    model: str
    prompt: str
    response_schema: Dict[str, Any] = field(
        default_factory=lambda: dict(TITLES_RESPONSE_SCHEMA)
    )
    response_mime_type: str = field(default=JSON_MIME_TYPE)

    def __post_init__(self):
        if not isinstance(self.model, str) or not self.model.strip():
            raise ValueError("Model must be a non-empty string")
        if not isinstance(self.prompt, str) or not self.prompt.strip():
            raise ValueError("Prompt must be a non-empty string")


class TitleGenerationClient(ABC):
    @abstractmethod
    async def generate_content(self, request: GenerationRequest) -> Optional[str]:
        """
        Send the request and return the raw response text.

        Args:
            request: Model, prompt and response schema for one topic

        Returns:
            Text of the structured response, or None if the service returned none
        """
        raise NotImplementedError("Subclasses must implement this method")
