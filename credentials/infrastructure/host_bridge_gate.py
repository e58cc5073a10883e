import inspect
from typing import Any

from credentials.domain.models import CredentialGate


async def _call_host(method, *args) -> Any:
    result = method(*args)
    if inspect.isawaitable(result):
        result = await result
    return result


class HostBridgeCredentialGate(CredentialGate):
    """
    Delegates to a host-provided key picker.

    The host object is expected to expose ``has_selected_api_key()`` and
    ``open_select_key()``, either plain or coroutine functions. A missing host
    or a missing query method means no credential.
    """

    def __init__(self, host: Any = None):
        super().__init__()
        self.host = host

    async def _query_selected(self) -> bool:
        query = getattr(self.host, "has_selected_api_key", None)
        if query is None:
            return False
        return bool(await _call_host(query))

    async def _open_selection(self) -> None:
        open_select = getattr(self.host, "open_select_key", None)
        if open_select is None:
            raise RuntimeError("Host environment does not provide a key selection flow")
        await _call_host(open_select)
