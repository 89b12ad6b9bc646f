"""Call session manager."""
import asyncio
import logging
from typing import Awaitable, Callable, Optional, Set

from call_agent.core.errors import (
    CallAgentError,
    StatusRefreshError,
    describe_call_error,
    describe_script_error,
    STATUS_REFRESH_MESSAGE,
)
from call_agent.services.call_session.models import CallSessionState, PollingState
from call_agent.services.call_session.poller import (
    DEFAULT_POLL_INTERVAL_SECONDS,
    CancellationToken,
    StatusPoller,
)
from call_agent.services.script.generator import ScriptGenerationService
from call_agent.services.script.models import CallBrief
from call_agent.services.telephony.base import TelephonyProvider
from call_agent.services.telephony.initiator import CallInitiationService
from call_agent.services.telephony.models import CallHandle, CallRequest, CallStatusDetails

logger = logging.getLogger(__name__)


class CallSessionManager:
    """Owns the call session and orchestrates generate, call and track.

    Every mutation of the session state goes through this class and runs on
    the event loop, so the state needs no lock. Only one call is tracked at
    a time: launching a new call cancels polling for the previous one.
    """

    def __init__(
        self,
        script_service: ScriptGenerationService,
        call_service: CallInitiationService,
        provider: TelephonyProvider,
        poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS,
        sleep: Optional[Callable[[float], Awaitable[None]]] = None,
    ):
        self.script_service = script_service
        self.call_service = call_service
        self.provider = provider
        self.poller = StatusPoller(
            fetch_status=provider.fetch_call_status,
            interval=poll_interval,
            sleep=sleep or asyncio.sleep,
        )
        self.state = CallSessionState()
        self._token: Optional[CancellationToken] = None
        self._poll_task: Optional[asyncio.Task] = None
        self._background_tasks: Set[asyncio.Task] = set()

    @property
    def poll_task(self) -> Optional[asyncio.Task]:
        """Polling task for the active call, if any."""
        return self._poll_task

    def snapshot(self) -> CallSessionState:
        """Get a copy of the session state for observers."""
        return self.state.model_copy(deep=True)

    def set_script(self, script: str) -> None:
        """Override the current script with user-edited text."""
        self.state.script = script
        logger.info(f"[SESSION] Script overridden (length: {len(script)})")

    async def generate_script(self, brief: CallBrief) -> Optional[str]:
        """
        Generate a script and store it in the session.

        Returns:
            The script, or None when generation failed (see script_error)
        """
        self.state.script_error = None
        try:
            script = await self.script_service.generate_script(brief)
        except CallAgentError as e:
            self.state.script_error = describe_script_error(e)
            logger.error(
                f"[SESSION] Script generation failed - Error: {type(e).__name__}: {str(e)}"
            )
            return None

        self.state.script = script
        return script

    async def start_call(self, request: CallRequest) -> Optional[CallHandle]:
        """
        Place a call and start tracking its status.

        A failed call leaves the current call and its polling untouched.

        Returns:
            The new call handle, or None when the call failed (see call_error)
        """
        self.state.call_error = None
        try:
            handle = await self.call_service.start_call(request)
        except CallAgentError as e:
            self.state.call_error = describe_call_error(e)
            logger.error(
                f"[SESSION] Call initiation failed - Error: {type(e).__name__}: {str(e)}"
            )
            return None

        self._stop_polling()
        self.state.begin_call(handle)
        logger.info(
            f"[SESSION] Tracking call - CallSid: {handle.call_sid}, "
            f"Initial status: {handle.status}"
        )
        if self.state.polling_state == PollingState.POLLING:
            self._start_polling(handle.call_sid)
        return handle

    async def close(self) -> None:
        """Stop polling and wait for outstanding polling tasks to finish."""
        self._stop_polling()
        tasks = list(self._background_tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("[SESSION] Session closed")

    def _is_current(self, call_sid: str, token: CancellationToken) -> bool:
        return (
            not token.cancelled
            and token is self._token
            and self.state.handle is not None
            and self.state.handle.call_sid == call_sid
        )

    def _start_polling(self, call_sid: str) -> None:
        token = CancellationToken()
        self._token = token

        def on_status(details: CallStatusDetails) -> None:
            if not self._is_current(call_sid, token):
                return
            self.state.status_error = None
            self.state.record_status(details.status)

        def on_error(error: StatusRefreshError) -> None:
            if not self._is_current(call_sid, token):
                return
            self.state.status_error = STATUS_REFRESH_MESSAGE

        task = asyncio.create_task(
            self.poller.run(call_sid, token, on_status=on_status, on_error=on_error)
        )
        self._poll_task = task
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)

    def _stop_polling(self) -> None:
        if self._token is not None:
            self._token.cancel()
            logger.debug("[SESSION] Polling for previous call cancelled")
        self._token = None
        self._poll_task = None
        if self.state.polling_state == PollingState.POLLING:
            self.state.polling_state = PollingState.IDLE
