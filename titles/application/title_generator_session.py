import logging
from typing import List, Optional

from credentials.domain.models import CredentialGate
from titles.application.generate_titles_use_case import GenerateTitlesUseCase
from titles.domain.models import CredentialFailure, Failure, Outcome, Success

logger = logging.getLogger(__name__)


class TitleGeneratorSession:
    """
    State a front end keeps around the title use case.

    Owns the busy flag that stops overlapping requests, the credential status
    shown to the user, and the result of the latest submission.
    """

    def __init__(
        self,
        credential_gate: CredentialGate,
        use_case: Optional[GenerateTitlesUseCase] = None,
    ):
        self.credential_gate = credential_gate
        self.use_case = use_case or GenerateTitlesUseCase(
            credential_gate=credential_gate
        )
        self.is_loading = False
        self.has_api_key = False
        self.titles: List[str] = []
        self.error: Optional[str] = None

    async def initialize(self) -> bool:
        self.has_api_key = await self.credential_gate.has_credential()
        return self.has_api_key

    async def select_key(self) -> None:
        await self.credential_gate.request_selection()
        self.has_api_key = True

    async def submit(self, topic: str) -> Optional[Outcome]:
        """
        Run one generation request.

        Returns None without doing anything if a request is still running.
        """
        if self.is_loading:
            logger.warning("Title generation already in progress, ignoring submit")
            return None

        self.is_loading = True
        self.error = None
        self.titles = []
        try:
            outcome = await self.use_case.execute(topic)
        finally:
            self.is_loading = False

        if isinstance(outcome, Success):
            self.titles = list(outcome.titles)
        elif isinstance(outcome, Failure):
            self.error = outcome.message
            # the use case has already invalidated the gate
            if isinstance(outcome, CredentialFailure):
                self.has_api_key = False

        return outcome
