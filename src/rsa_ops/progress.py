from __future__ import annotations

import itertools
import sys
import threading
import time
from contextlib import contextmanager
from typing import Iterator


def format_seconds(seconds: float) -> str:
    if seconds < 60:
        return f"{seconds:.1f}s"
    mins = int(seconds // 60)
    secs = seconds - mins * 60
    return f"{mins}m {secs:.0f}s"


def _is_interactive() -> bool:
    isatty = getattr(sys.stdout, "isatty", None)
    return bool(isatty and isatty())


@contextmanager
def spinner(message: str, interval_s: float = 0.1, enabled: bool | None = None) -> Iterator[None]:
    """Spin next to `message` while a blocking request runs (terminals only)."""
    if enabled is None:
        enabled = _is_interactive()
    if not enabled:
        yield
        return

    stop = threading.Event()

    def run() -> None:
        for ch in itertools.cycle("|/-\\"):
            if stop.is_set():
                break
            sys.stdout.write(f"\r{message} {ch}")
            sys.stdout.flush()
            time.sleep(interval_s)

        sys.stdout.write("\r" + (" " * (len(message) + 2)) + "\r")
        sys.stdout.flush()

    t = threading.Thread(target=run, daemon=True)
    t.start()
    try:
        yield
    finally:
        stop.set()
        t.join(timeout=1)
