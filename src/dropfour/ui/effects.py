from __future__ import annotations
import itertools
import sys
import time
from typing import Optional

from dropfour import config

FRAMES = "|/-\\"


def ai_thinking(label: str = "AI is thinking", delay: Optional[float] = None) -> None:
    """
    Short visible pause before a computer move, with a spinner unless
    AI_THINKING_SPINNER is off. The search itself has already finished or
    has not started yet; this is cosmetic.
    """
    delay = config.AI_THINK_DELAY_SEC if delay is None else delay
    if delay <= 0:
        return

    if not config.AI_THINKING_SPINNER:
        time.sleep(delay)
        return

    deadline = time.monotonic() + delay
    for frame in itertools.cycle(FRAMES):
        if time.monotonic() >= deadline:
            break
        sys.stdout.write(f"\r{label}... {frame}")
        sys.stdout.flush()
        time.sleep(0.08)
    sys.stdout.write("\r" + (" " * (len(label) + 10)) + "\r")
    sys.stdout.flush()
