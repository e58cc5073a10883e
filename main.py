import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from config.domain.models import TitleGeneratorConfig
from config.infrastructure.json import ConfigurationLoader
from credentials.infrastructure.environment_gate import EnvironmentCredentialGate
from titles.application.generate_titles_use_case import GenerateTitlesUseCase
from titles.application.title_generator_session import TitleGeneratorSession


async def run(config: TitleGeneratorConfig, topic: str) -> int:
    gate = EnvironmentCredentialGate()
    session = TitleGeneratorSession(
        credential_gate=gate,
        use_case=GenerateTitlesUseCase(config=config, credential_gate=gate),
    )

    if not await session.initialize():
        print("No Gemini API key found. Please select one to continue.")
        await session.select_key()

    await session.submit(topic)

    if session.error:
        print(f"Error: {session.error}")
        if not session.has_api_key:
            print("Set GEMINI_API_KEY or run again to select a different key.")
        return 1

    print("Generated Titles")
    print("=" * 50)
    for i, title in enumerate(session.titles, 1):
        print(f"{i}. {title}")
    return 0


def main():
    """Entry point: python main.py [config.json] [topic ...]"""
    load_dotenv()

    args = sys.argv[1:]
    config = TitleGeneratorConfig()
    if args and args[0].endswith(".json"):
        config = ConfigurationLoader.load_from_file(Path(args.pop(0)))

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    topic = " ".join(args) if args else input("Describe your video topic: ")
    sys.exit(asyncio.run(run(config, topic)))


if __name__ == "__main__":
    main()
