from config.domain.models import LLMConfig
from titles.domain.models import TitleGenerationClient
from titles.infrastructure.gemini_client import GeminiTitleClient
from titles.infrastructure.models import GeminiTitleSettings


class TitleClientFactory:
    @staticmethod
    def create_client(llm_config: LLMConfig) -> TitleGenerationClient:
        """Create a title generation client from validated configuration."""
        provider = llm_config.provider.lower()

        if provider == "gemini":
            return TitleClientFactory._create_gemini_client(llm_config)
        else:
            raise ValueError(f"Unsupported LLM provider: {provider}")

    @staticmethod
    def _create_gemini_client(llm_config: LLMConfig) -> GeminiTitleClient:
        # An empty key falls through to the environment lookup in the client
        return GeminiTitleClient(
            settings=GeminiTitleSettings.from_dict(llm_config.config),
            api_key=llm_config.api_key or None,
        )
