"""Signal handling utilities for the sigtree CLI.

A rendered tree is usually piped into a pager or ``head``; when the reader goes
away the process receives SIGPIPE, and Ctrl+C delivers SIGINT. Both are recorded
here instead of raising, so that output stops cleanly and the process exits with
the conventional status.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, Optional

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141

# SIGPIPE does not exist on Windows
_SIGPIPE = getattr(signal, "SIGPIPE", None)


class SignalHandler:
    """Records SIGPIPE and SIGINT so the CLI can stop writing and exit cleanly.

    Attributes:
        sigpipe_received: Event that is set when a SIGPIPE signal is received.
        sigint_received: Event that is set when a SIGINT signal is received.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._original_handlers: Dict[int, Any] = {}

    def install(self) -> None:
        """Install the handlers, remembering the ones they replace."""
        for signum, handler in ((_SIGPIPE, self.handle_sigpipe), (signal.SIGINT, self.handle_sigint)):
            if signum is None:
                continue
            self._original_handlers[signum] = signal.getsignal(signum)
            signal.signal(signum, handler)

    def _restore(self, signum: int) -> None:
        original = self._original_handlers.pop(signum, None)
        if original is not None:
            signal.signal(signum, original)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        self._restore(signum)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        self._restore(signum)

    def interrupted(self) -> bool:
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Get the exit status implied by the received signals.

        Returns:
            141 after SIGPIPE, 130 after SIGINT, None if neither was received.
        """
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Configure signal handlers for SIGPIPE and SIGINT."""
    signal_handler.install()


def cleanup() -> None:
    """Redirect stdout to the null device after an interruption.

    Registered with atexit so that the interpreter's final flush of stdout does not
    print a broken pipe error.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
