import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class CredentialGate(ABC):
    """
    Tracks whether a usable API credential is currently selected.

    Subclasses bridge to whatever the host environment offers for storing and
    picking a key. The gate never looks at the key itself; whether it works is
    only discovered when a generation request is made with it.
    """

    def __init__(self):
        self.selected = False

    async def has_credential(self) -> bool:
        """
        Query the environment for a selected credential.

        Never raises. A failing or unavailable query counts as no credential.
        """
        try:
            self.selected = bool(await self._query_selected())
        except Exception as e:
            logger.warning(f"Credential query failed, treating as unselected: {e}")
            self.selected = False
        return self.selected

    async def request_selection(self) -> None:
        """
        Run the interactive selection flow and re-open the gate.

        The gate re-opens whatever the user picked. Errors raised by the flow
        itself reach the caller.
        """
        await self._open_selection()
        self.selected = True

    def invalidate(self) -> None:
        """Mark the current credential as unusable."""
        if self.selected:
            logger.warning("Credential marked invalid, a new selection is required")
        self.selected = False

    @abstractmethod
    async def _query_selected(self) -> bool:
        raise NotImplementedError("Subclasses must implement this method")

    @abstractmethod
    async def _open_selection(self) -> None:
        raise NotImplementedError("Subclasses must implement this method")
