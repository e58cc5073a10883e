"""Credential gate backed by process environment variables."""

import asyncio
import getpass
import inspect
import os
from typing import Callable, Optional, Sequence

from dotenv import load_dotenv

from credentials.domain.models import CredentialGate


API_KEY_ENV_VARS = ("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY")


def find_api_key(env_vars: Sequence[str] = API_KEY_ENV_VARS) -> Optional[str]:
    """Return the first non-empty API key found in the environment."""
    for name in env_vars:
        value = os.getenv(name)
        if value:
            return value
    return None


class EnvironmentCredentialGate(CredentialGate):
    """
    Credential is selected when one of the known API key variables is set.

    Selection asks for a key through ``key_prompt`` and exports it as
    GEMINI_API_KEY so clients created afterwards pick it up.
    """

    def __init__(
        self,
        key_prompt: Optional[Callable[[str], str]] = None,
        env_vars: Sequence[str] = API_KEY_ENV_VARS,
        load_env_file: bool = True,
    ):
        super().__init__()
        self.key_prompt = key_prompt or getpass.getpass
        self.env_vars = tuple(env_vars)
        if load_env_file:
            load_dotenv()

    async def _query_selected(self) -> bool:
        return find_api_key(self.env_vars) is not None

    async def _open_selection(self) -> None:
        if inspect.iscoroutinefunction(self.key_prompt):
            key = await self.key_prompt("Gemini API key: ")
        else:
            key = await asyncio.to_thread(self.key_prompt, "Gemini API key: ")

        key = (key or "").strip()
        if key:
            os.environ[self.env_vars[0]] = key
