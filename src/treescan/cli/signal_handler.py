"""Interruption tracking for the treescan CLI.

treescan emits its whole listing in one write after the scan has finished. A
consumer such as ``treescan | head -c 100`` may close the pipe before that write
completes, and a user may press Ctrl+C during a long walk. Both cases are recorded
here. The writer then stops without a traceback, and the entry point turns the
recorded signal into the process exit status (141 for a closed pipe, 130 for Ctrl+C).
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

# Exit statuses used by shells for death by SIGPIPE and SIGINT
SIGPIPE_EXIT_CODE = 141
SIGINT_EXIT_CODE = 130


class SignalHandler:
    """Remembers whether the listing was cut short by a closed pipe or Ctrl+C.

    The write path asks interrupted() before writing the report, and main() asks
    exit_code() once the run is over. A handler only records its signal once; it then
    puts back whatever handler was installed before, so pressing Ctrl+C a second time
    during a slow scan stops treescan immediately.

    Attributes:
        sigpipe_received: Set once the reader of stdout has gone away.
        sigint_received: Set once the user has pressed Ctrl+C.
        original_sigpipe_handler: SIGPIPE handler in place before treescan installed its own.
        original_sigint_handler: SIGINT handler in place before treescan installed its own.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Check whether the listing should stop being written.

        Returns:
            True once SIGPIPE or SIGINT has been recorded.
        """
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status for an interrupted run.

        A closed pipe takes precedence over Ctrl+C, since no output reached the
        reader in either case and the pipe is the more specific cause.

        Returns:
            141 after SIGPIPE, 130 after SIGINT, or None if the run was not interrupted.
        """
        if self.sigpipe_received.is_set():
            return SIGPIPE_EXIT_CODE
        if self.sigint_received.is_set():
            return SIGINT_EXIT_CODE
        return None


# Shared by SafeWriter and main()
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Route SIGPIPE and SIGINT to the shared handler."""
    signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Send stdout to the null device if the listing was interrupted.

    Python flushes stdout at shutdown; after a closed pipe that flush would print a
    second error. Runs from atexit.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
