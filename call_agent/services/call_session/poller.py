"""Call status polling."""
import asyncio
import logging
from typing import Awaitable, Callable

from call_agent.core.errors import StatusRefreshError
from call_agent.services.call_session.timeline import is_terminal
from call_agent.services.telephony.models import CallStatusDetails

logger = logging.getLogger(__name__)

DEFAULT_POLL_INTERVAL_SECONDS = 5.0


class CancellationToken:
    """Cooperative cancellation flag for one polling loop."""

    def __init__(self):
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class StatusPoller:
    """Polls a call's status on a fixed cadence until it is terminal.

    Fetches are sequential: the next fetch is only scheduled after the
    previous one resolved. A failed fetch is reported and retried on the
    same cadence.
    """

    def __init__(
        self,
        fetch_status: Callable[[str], Awaitable[CallStatusDetails]],
        interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.fetch_status = fetch_status
        self.interval = interval
        self.sleep = sleep

    async def run(
        self,
        call_sid: str,
        token: CancellationToken,
        on_status: Callable[[CallStatusDetails], None],
        on_error: Callable[[StatusRefreshError], None],
    ) -> int:
        """
        Poll until a terminal status is reported or the token is cancelled.

        Args:
            call_sid: Provider call identifier
            token: Cancellation flag checked before every fetch and callback
            on_status: Receives each fetched status
            on_error: Receives each failed fetch

        Returns:
            Number of fetches issued
        """
        fetches = 0
        logger.info(f"[POLLER] Polling started - CallSid: {call_sid}")

        while not token.cancelled:
            fetches += 1
            try:
                details = await self.fetch_status(call_sid)
            except Exception as e:
                if token.cancelled:
                    break
                logger.warning(
                    f"[POLLER] Status fetch failed - CallSid: {call_sid}, "
                    f"Error: {type(e).__name__}: {str(e)}"
                )
                on_error(StatusRefreshError(call_sid, e))
            else:
                if token.cancelled:
                    break
                logger.debug(
                    f"[POLLER] Status fetched - CallSid: {call_sid}, Status: {details.status}"
                )
                on_status(details)
                if is_terminal(details.status):
                    logger.info(
                        f"[POLLER] Terminal status reached - CallSid: {call_sid}, "
                        f"Status: {details.status}, Fetches: {fetches}"
                    )
                    return fetches

            await self.sleep(self.interval)

        logger.info(f"[POLLER] Polling cancelled - CallSid: {call_sid}, Fetches: {fetches}")
        return fetches
