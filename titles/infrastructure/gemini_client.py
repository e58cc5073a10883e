import logging
from typing import Optional

from google import genai

from credentials.infrastructure.environment_gate import find_api_key
from titles.domain.models import GenerationRequest, TitleGenerationClient
from titles.infrastructure.models import GeminiTitleSettings

logger = logging.getLogger(__name__)


class MissingApiKeyError(RuntimeError):
    """Raised when a Gemini client is requested without any API key."""


class GeminiTitleClient(TitleGenerationClient):
    def __init__(
        self,
        settings: Optional[GeminiTitleSettings] = None,
        api_key: Optional[str] = None,
        client: Optional[genai.Client] = None,
    ):
        """
        Initialize the Gemini client using the google-genai SDK.

        Args:
            settings: Sampling and thinking settings. Defaults to GeminiTitleSettings().
            api_key: Gemini API key. If None, looked up in the environment.
            client: Pre-built SDK client, mainly for tests.
        """
        self.settings = settings or GeminiTitleSettings()

        if client is not None:
            self.client = client
            return

        api_key = api_key or find_api_key()
        if not api_key:
            raise MissingApiKeyError(
                "API Key must be set before creating the Gemini client. "
                "Select a key or set GEMINI_API_KEY."
            )
        self.client = genai.Client(api_key=api_key)

    async def generate_content(self, request: GenerationRequest) -> Optional[str]:
        logger.debug(
            f"Requesting titles from {request.model} "
            f"(thinking budget {self.settings.thinking.thinking_budget})"
        )
        response = await self.client.aio.models.generate_content(
            model=request.model,
            contents=request.prompt,
            config=self.settings.to_generate_config(
                request.response_mime_type, request.response_schema
            ),
        )
        return response.text
