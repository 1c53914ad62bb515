"""Signal handling for the fstree command-line tool.

SIGPIPE (output closed early, e.g. piping into ``head``) and SIGINT (Ctrl+C) are
recorded instead of killing the process, so output can stop cleanly and the tool can
exit with the conventional status code.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Any, Dict, List, Optional

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records SIGPIPE and SIGINT so the writer can stop and the CLI can pick an exit code.

    Attributes:
        sigpipe_received: Set once SIGPIPE has been delivered.
        sigint_received: Set once SIGINT has been delivered.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self._previous_handlers: Dict[int, Any] = {}

    def install(self) -> None:
        """Install handlers for SIGPIPE (where the platform has it) and SIGINT."""
        for signum in self._signals():
            self._previous_handlers[signum] = signal.getsignal(signum)
            signal.signal(signum, self._handle)

    def _handle(self, signum: int, frame: Optional[FrameType]) -> None:
        if signum == signal.SIGINT:
            self.sigint_received.set()
        else:
            self.sigpipe_received.set()
        # Further deliveries go to the handler that was installed before
        previous = self._previous_handlers.get(signum) or signal.SIG_DFL
        signal.signal(signum, previous)

    @property
    def interrupted(self) -> bool:
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status implied by the received signals, or None if none was received."""
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None

    @staticmethod
    def _signals() -> List[signal.Signals]:
        signums = [signal.SIGINT]
        if hasattr(signal, "SIGPIPE"):
            signums.append(signal.SIGPIPE)
        return signums


# Shared instance used by the writer and the entry point
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the shared signal handler."""
    signal_handler.install()


def cleanup() -> None:
    """Silence stdout at exit after an interruption so shutdown prints no extra errors."""
    if signal_handler.interrupted:
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
