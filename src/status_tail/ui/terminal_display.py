"""In-place terminal status display with a background repaint thread."""

from __future__ import annotations

import logging
import threading
from types import TracebackType

from rich.console import Console
from rich.control import Control

from ..config import DisplaySettings
from .message_tail import DEFAULT_MAX_MESSAGES, MessageTail
from .models import DisplaySnapshot

DEFAULT_REFRESH_INTERVAL_SECONDS = 0.5

CLEAR_SCREEN = str(Control.clear())
CURSOR_HOME = str(Control.home())
HIDE_CURSOR = str(Control.show_cursor(False))
SHOW_CURSOR = str(Control.show_cursor(True))


def render_frame(snapshot: DisplaySnapshot) -> str:
    """Build the exact text written by one repaint."""
    return CURSOR_HOME + "".join(f"{line}\n" for line in snapshot.lines())


class _DisplayLogHandler(logging.Handler):
    """Route logger output into the message tail instead of the terminal."""

    def __init__(self, display: DisplayController) -> None:
        super().__init__()
        self.display = display

    def emit(self, record: logging.LogRecord) -> None:
        try:
            self.display.log(f"{record.levelname} {record.getMessage()}")
        except Exception:
            self.handleError(record)


class DisplayController:
    """Header lines plus a rolling message tail, repainted in place.

    A single lock guards header lines and message tail; the repaint thread
    holds it for the whole snapshot-and-write so no frame ever shows a
    half-applied update. The repaint thread is the only writer of the
    console's output stream.
    """

    def __init__(
        self,
        separator: str,
        *header_lines: str,
        console: Console | None = None,
        refresh_interval: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
        max_messages: int = DEFAULT_MAX_MESSAGES,
        logger: logging.Logger | None = None,
    ) -> None:
        if refresh_interval <= 0:
            raise ValueError("refresh_interval must be > 0.")
        self.console = console or Console()
        self.separator = separator
        self.refresh_interval = refresh_interval
        self.logger = logger or logging.getLogger("status_tail.ui.terminal_display")
        self._lines = list(header_lines)
        self._messages = MessageTail(max_messages)
        self._lock = threading.Lock()

        self._stop_event = threading.Event()
        self._stop_lock = threading.Lock()
        self._stopped = False

        self._attached_logger: logging.Logger | None = None
        self._original_handlers: list[logging.Handler] = []

        self._thread = threading.Thread(
            target=self._run,
            name="status-tail-repaint",
            daemon=True,
        )
        self._thread.start()

    @classmethod
    def from_settings(
        cls,
        settings: DisplaySettings,
        *header_lines: str,
        console: Console | None = None,
        logger: logging.Logger | None = None,
    ) -> DisplayController:
        return cls(
            settings.separator,
            *header_lines,
            console=console,
            refresh_interval=settings.refresh_interval_seconds,
            max_messages=settings.max_messages,
            logger=logger,
        )

    def log(self, message: str) -> None:
        """Put one message at the top of the tail, evicting the oldest past the cap."""
        with self._lock:
            self._messages.push(message)

    def update_line(self, line_number: int, content: str) -> None:
        """Overwrite header line `line_number` (1-based); out-of-range is a no-op."""
        with self._lock:
            if 0 < line_number <= len(self._lines):
                self._lines[line_number - 1] = content

    def snapshot(self) -> DisplaySnapshot:
        with self._lock:
            return self._snapshot_locked()

    @property
    def running(self) -> bool:
        return self._thread.is_alive()

    def stop(self) -> None:
        """Stop repainting, restore the cursor, and wait for the thread to exit.

        Safe to call more than once; later calls only wait for the exit.
        """
        with self._stop_lock:
            if not self._stopped:
                self._stopped = True
                self.detach_logger()
                self._stop_event.set()
        self._thread.join()

    def attach_logger(self, logger: logging.Logger) -> None:
        """Replace the logger's handlers with one that feeds the message tail.

        A no-op once the display is stopped. Attaching again first restores
        the previously attached logger.
        """
        with self._stop_lock:
            if self._stopped:
                return
            self.detach_logger()
            self._attached_logger = logger
            self._original_handlers = list(logger.handlers)
            logger.handlers = [_DisplayLogHandler(self)]

    def detach_logger(self) -> None:
        """Restore original logger handlers."""
        if self._attached_logger is None:
            return
        self._attached_logger.handlers = self._original_handlers
        self._attached_logger = None
        self._original_handlers = []

    def __enter__(self) -> DisplayController:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    def _snapshot_locked(self) -> DisplaySnapshot:
        return DisplaySnapshot(
            header_lines=tuple(self._lines),
            separator=self.separator,
            messages=tuple(self._messages.snapshot()),
        )

    def _run(self) -> None:
        try:
            try:
                self._emit(CLEAR_SCREEN + HIDE_CURSOR)
            except Exception:
                self.logger.exception("Terminal setup failed; repainting anyway.")
            while not self._stop_event.wait(self.refresh_interval):
                try:
                    self._repaint()
                except Exception:
                    self.logger.exception("Repaint failed; continuing with next tick.")
        finally:
            self._emit(SHOW_CURSOR)

    def _repaint(self) -> None:
        with self._lock:
            error = self._write(render_frame(self._snapshot_locked()))
        if error is not None:
            self.logger.debug("Terminal write failed; frame skipped: %s", error)

    def _emit(self, text: str) -> None:
        with self._lock:
            error = self._write(text)
        if error is not None:
            self.logger.debug("Terminal write failed: %s", error)

    def _write(self, text: str) -> Exception | None:
        # Caller holds the lock; failures are logged only after it is released.
        stream = self.console.file
        try:
            stream.write(text)
            stream.flush()
        except (OSError, ValueError) as exc:
            return exc
        return None


def create(
    separator: str,
    *header_lines: str,
    console: Console | None = None,
    refresh_interval: float = DEFAULT_REFRESH_INTERVAL_SECONDS,
    max_messages: int = DEFAULT_MAX_MESSAGES,
    logger: logging.Logger | None = None,
) -> DisplayController:
    """Start a display with the given separator and initial header lines."""
    return DisplayController(
        separator,
        *header_lines,
        console=console,
        refresh_interval=refresh_interval,
        max_messages=max_messages,
        logger=logger,
    )
