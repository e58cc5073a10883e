"""Use case for turning a video topic into a list of title suggestions."""

import json
import logging
from typing import Any, Callable, List, Optional

from config.domain.models import TitleGeneratorConfig
from credentials.domain.models import CredentialGate
from titles.application.title_client_factory import TitleClientFactory
from titles.domain.error_rules import ErrorClassifier, credential_rule
from titles.domain.models import (
    DEFAULT_MODEL,
    GenerationRequest,
    Outcome,
    Success,
    TitleGenerationClient,
    UnknownFailure,
    ValidationFailure,
)

logger = logging.getLogger(__name__)

EMPTY_TOPIC_MESSAGE = "Please enter a video topic."
UNEXPECTED_FORMAT_MESSAGE = "Received an unexpected format from the API."


def build_prompt(topic: str, title_count: int = 5) -> str:
    return (
        f"Generate {title_count} catchy, viral, and SEO-friendly YouTube titles "
        f'for a video about: "{topic}".'
    )


def extract_titles(payload: Any) -> Optional[List[str]]:
    """Return the titles list if the parsed payload has the expected shape."""
    if not isinstance(payload, dict):
        return None
    titles = payload.get("titles")
    if not isinstance(titles, list):
        return None
    if not all(isinstance(title, str) for title in titles):
        return None
    return titles


class GenerateTitlesUseCase:
    """
    Generates title suggestions for a topic with one structured request.

    Every call returns an Outcome; no exception escapes ``execute``. The use
    case holds no state between calls, so callers are responsible for not
    starting a new request while one is still running.
    """

    def __init__(
        self,
        config: Optional[TitleGeneratorConfig] = None,
        credential_gate: Optional[CredentialGate] = None,
        client_factory: Optional[Callable[[], TitleGenerationClient]] = None,
        classifier: Optional[ErrorClassifier] = None,
    ):
        self.config = config or TitleGeneratorConfig()
        self.credential_gate = credential_gate
        # The client is built per request so a key selected later is used
        self.client_factory = client_factory or (
            lambda: TitleClientFactory.create_client(self.config.llm_config)
        )
        self.classifier = classifier or ErrorClassifier(
            [credential_rule(self.config.extra_credential_markers)]
        )

    def build_request(self, topic: str) -> GenerationRequest:
        model = self.config.llm_config.config.get("model", DEFAULT_MODEL)
        return GenerationRequest(
            model=model,
            prompt=build_prompt(topic, self.config.title_count),
        )

    async def execute(self, topic: str) -> Outcome:
        """
        Generate titles for a topic.

        Args:
            topic: Free text description of the video

        Returns:
            Success with the titles in the order returned, or a failure
            outcome with a message suitable for display
        """
        if not isinstance(topic, str) or not topic.strip():
            return ValidationFailure(EMPTY_TOPIC_MESSAGE)

        try:
            request = self.build_request(topic)
            client = self.client_factory()
            text = await client.generate_content(request)
            if not text:
                return UnknownFailure(UNEXPECTED_FORMAT_MESSAGE)

            titles = extract_titles(json.loads(text))
            if titles is None:
                logger.warning(f"Unexpected response shape: {text[:200]}")
                return UnknownFailure(UNEXPECTED_FORMAT_MESSAGE)

            return Success(titles)

        except Exception as e:
            logger.error(f"Title generation failed: {e}", exc_info=True)
            if self.classifier.invalidates_credential(e) and self.credential_gate:
                self.credential_gate.invalidate()
            return self.classifier.classify(e)
