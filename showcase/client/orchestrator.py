"""
Upload orchestrator.

Client-side state machine for one image upload:

    idle -> uploading -> processing -> success -> idle
    uploading | processing -> error -> idle (explicit user action)

The orchestrator owns at most one polling task per instance. Every
polling cycle gets its own CancellationToken; reset/remove/select/close
set the token and cancel the task, so no status call is issued after
cancellation returns.

Dependencies: asyncio, showcase.client.api_client, showcase.core.exceptions
System role: Upload-and-poll workflow coordination
"""

import asyncio
import inspect
import logging
import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Awaitable, Callable

from showcase.client.api_client import ShowcaseAPIClient
from showcase.configs.polling import PollingSettings
from showcase.core.exceptions import (
    InvalidTransitionError,
    PollingTimeoutError,
    ShowcaseException,
    ValidationError,
)
from showcase.models.image import ProcessingStatus

logger = logging.getLogger(__name__)

ACCEPTED_CONTENT_TYPES = frozenset({"image/jpeg", "image/png"})

MESSAGE_PREPARING = "Preparing secure upload..."
MESSAGE_UPLOADING = "Uploading image..."
MESSAGE_PROCESSING = "Upload complete! The AI is now analyzing your image..."
MESSAGE_SUCCESS = "Analysis complete!"


class UploadState(str, Enum):
    """Upload lifecycle states."""

    IDLE = "idle"
    UPLOADING = "uploading"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class SelectedFile:
    """A file chosen by the user, held in memory until uploaded."""

    name: str
    content_type: str
    data: bytes

    @classmethod
    def from_path(cls, path: str | Path) -> "SelectedFile":
        """Load a file from disk, guessing its MIME type from the extension."""
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            content_type=content_type or "application/octet-stream",
            data=path.read_bytes(),
        )


@dataclass(frozen=True)
class PollingPolicy:
    """Fixed-delay polling parameters."""

    interval_seconds: float = 2.5
    max_attempts: int = 20
    success_reset_delay: float = 2.0

    @classmethod
    def from_settings(cls, settings: PollingSettings) -> "PollingPolicy":
        return cls(
            interval_seconds=settings.interval_seconds,
            max_attempts=settings.max_attempts,
            success_reset_delay=settings.success_reset_delay,
        )


class CancellationToken:
    """One-shot cancellation flag with a cancellable sleep."""

    def __init__(self) -> None:
        self._event = asyncio.Event()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def cancel(self) -> None:
        self._event.set()

    async def sleep(self, delay: float) -> bool:
        """
        Wait for delay seconds.

        Returns:
            bool: True if the full delay elapsed, False if cancelled first
        """
        if self.cancelled:
            return False
        try:
            await asyncio.wait_for(self._event.wait(), timeout=delay)
        except asyncio.TimeoutError:
            return True
        return False


StateListener = Callable[[UploadState, str], None]
SuccessListener = Callable[[], Awaitable[Any] | Any]


class UploadOrchestrator:
    """
    Drives select -> sign -> PUT -> poll -> notify for a single file.

    Attributes:
        state: Current UploadState
        message: Short status text for display
        selected_file: File chosen for upload, if any
        last_error: Exception behind the current error state
        status_checks: Status calls made in the current polling cycle
    """

    def __init__(
        self,
        api: ShowcaseAPIClient,
        policy: PollingPolicy | None = None,
        on_upload_success: SuccessListener | None = None,
        on_state_change: StateListener | None = None,
    ) -> None:
        self._api = api
        self.policy = policy or PollingPolicy()
        self._on_upload_success = on_upload_success
        self._on_state_change = on_state_change

        self.state = UploadState.IDLE
        self.message = ""
        self.selected_file: SelectedFile | None = None
        self.last_error: Exception | None = None
        self.status_checks = 0

        self._token: CancellationToken | None = None
        self._poll_task: asyncio.Task | None = None
        # Bumped by every reset so in-flight upload steps can detect abandonment
        self._generation = 0

    @property
    def can_analyze(self) -> bool:
        return self.state is UploadState.IDLE and self.selected_file is not None

    @property
    def has_pending_poll(self) -> bool:
        return self._poll_task is not None and not self._poll_task.done()

    def select_file(self, file: SelectedFile) -> None:
        """
        Replace the selected file, abandoning any upload in progress.

        Raises:
            ValidationError: content type is not an accepted image type
        """
        if file.content_type not in ACCEPTED_CONTENT_TYPES:
            raise ValidationError(
                f"Unsupported file type: {file.content_type}",
                field="file",
                details={"accepted": sorted(ACCEPTED_CONTENT_TYPES)},
            )
        self.reset()
        self.selected_file = file

    def remove_file(self) -> None:
        """User removed the selected file: cancel everything and return to idle."""
        self.reset()

    def reset(self) -> None:
        """Cancel any polling, clear the file and return to idle immediately."""
        self._generation += 1
        self._cancel_polling()
        self.selected_file = None
        self.last_error = None
        self.status_checks = 0
        self._transition(UploadState.IDLE, "")

    def acknowledge_error(self) -> None:
        """
        Leave the error state, keeping the selected file so it can be retried.

        Raises:
            InvalidTransitionError: not currently in the error state
        """
        if self.state is not UploadState.ERROR:
            raise InvalidTransitionError("acknowledge error", self.state.value)
        self.last_error = None
        self._transition(UploadState.IDLE, "")

    async def analyze(self) -> None:
        """
        Upload the selected file and start polling for its analysis.

        Returns once polling has started (or the upload failed); use
        wait_until_settled() to await the outcome.

        Raises:
            InvalidTransitionError: an upload is already in progress
            ValidationError: no file selected
        """
        if self.state is not UploadState.IDLE:
            raise InvalidTransitionError("analyze", self.state.value)
        if self.selected_file is None:
            raise ValidationError("No file selected", field="file")

        file = self.selected_file
        generation = self._generation
        self.status_checks = 0
        self._transition(UploadState.UPLOADING, MESSAGE_PREPARING)

        try:
            url = await self._api.request_upload_url(file.name, file.content_type)
            if generation != self._generation:
                return
            self._set_message(MESSAGE_UPLOADING)
            await self._api.upload_file(url, file.data, file.content_type)
        except Exception as e:
            if generation == self._generation:
                self._fail(e)
            return

        if generation != self._generation:
            return
        self._start_polling(file.name)

    async def wait_until_settled(self) -> UploadState:
        """Wait for the current polling cycle (if any) to finish."""
        task = self._poll_task
        if task is not None:
            await asyncio.wait({task})
        return self.state

    async def close(self) -> None:
        """Reset and wait for the cancelled polling task to unwind."""
        task = self._poll_task
        self.reset()
        if task is not None:
            await asyncio.wait({task})

    def _start_polling(self, filename: str) -> None:
        self._cancel_polling()
        token = CancellationToken()
        self._token = token
        self._transition(UploadState.PROCESSING, MESSAGE_PROCESSING)
        self._poll_task = asyncio.create_task(
            self._poll(filename, token), name=f"poll-status:{filename}"
        )

    def _cancel_polling(self) -> None:
        if self._token is not None:
            self._token.cancel()
            self._token = None
        if self._poll_task is not None:
            if not self._poll_task.done():
                self._poll_task.cancel()
            self._poll_task = None

    async def _poll(self, filename: str, token: CancellationToken) -> None:
        policy = self.policy
        for attempt in range(1, policy.max_attempts + 1):
            if not await token.sleep(policy.interval_seconds):
                return

            self.status_checks = attempt
            try:
                status = await self._api.get_status(filename)
            except Exception as e:
                if not token.cancelled:
                    self._fail(e)
                return

            if token.cancelled:
                return

            logger.debug(
                "Status check",
                extra={"file_name": filename, "attempt": attempt, "status": status.value},
            )
            if status is ProcessingStatus.PROCESSED:
                await self._succeed(token)
                return

        if not token.cancelled:
            self._fail(PollingTimeoutError(filename, policy.max_attempts))

    async def _succeed(self, token: CancellationToken) -> None:
        self._transition(UploadState.SUCCESS, MESSAGE_SUCCESS)
        await self._notify_success()
        if await token.sleep(self.policy.success_reset_delay):
            self.selected_file = None
            self.status_checks = 0
            self._transition(UploadState.IDLE, "")

    async def _notify_success(self) -> None:
        if self._on_upload_success is None:
            return
        try:
            result = self._on_upload_success()
            if inspect.isawaitable(result):
                await result
        except Exception:
            logger.exception("Upload success listener failed")

    def _fail(self, error: Exception) -> None:
        self.last_error = error
        if isinstance(error, ShowcaseException):
            message = error.message
        else:
            message = str(error) or "Upload failed."
            logger.exception("Unexpected upload failure", exc_info=error)
        self._transition(UploadState.ERROR, message)

    def _set_message(self, message: str) -> None:
        self.message = message
        if self._on_state_change is not None:
            self._on_state_change(self.state, message)

    def _transition(self, state: UploadState, message: str) -> None:
        previous = self.state
        self.state = state
        if previous is not state:
            logger.info(
                "Upload state changed",
                extra={"from_state": previous.value, "to_state": state.value},
            )
        self._set_message(message)
