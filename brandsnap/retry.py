"""
retry.py — One retry/backoff policy applied to every image-model call.

  attempts   at most `max_attempts` (3)
  retryable  rate limit (429 / RESOURCE_EXHAUSTED), unavailable (503 / UNAVAILABLE),
             "overloaded" in the error text, or a response without image data
  backoff    2^(attempt+1) × base_delay_ms, attempt counted from 0
             → 4 000 ms after the 1st failure, 8 000 ms after the 2nd
  otherwise  stop at once and re-raise the error

Sleeping is injected so tests can run the schedule against a fake clock.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Callable, Optional, TypeVar

from rich.console import Console
from rich.markup import escape

from .errors import NoImageDataError

console = Console()

T = TypeVar("T")

RETRYABLE_CODES = frozenset({429, 503})
RETRYABLE_STATUSES = frozenset({"RESOURCE_EXHAUSTED", "UNAVAILABLE"})


def is_transient_error(exc: BaseException) -> bool:
    """True for rate-limit / overload / unavailable failures and empty image responses."""
    if isinstance(exc, NoImageDataError):
        return True

    # google.genai.errors.APIError carries `code` (int) and `status` (str)
    code = getattr(exc, "code", None)
    if code is None:
        code = getattr(exc, "status_code", None)
    if isinstance(code, int) and code in RETRYABLE_CODES:
        return True

    status = getattr(exc, "status", None)
    if isinstance(status, int) and status in RETRYABLE_CODES:
        return True
    if isinstance(status, str) and status.upper() in RETRYABLE_STATUSES:
        return True

    return "overloaded" in str(exc).lower()


@dataclass(frozen=True)
class RetryPolicy:
    max_attempts: int = 3
    base_delay_ms: int = 2000
    is_retryable: Callable[[BaseException], bool] = is_transient_error
    sleep: Callable[[float], None] = field(default=time.sleep, compare=False)

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")

    def delay_ms(self, attempt: int) -> int:
        """Wait after the failed attempt with zero-based index `attempt`."""
        return (2 ** (attempt + 1)) * self.base_delay_ms

    def call(self, fn: Callable[[], T], label: str = "call") -> T:
        """
        Run `fn` under this policy.

        Returns the first successful result. Re-raises the last observed error when a
        non-retryable error occurs or the attempts are exhausted.
        """
        last_error: Optional[BaseException] = None

        for attempt in range(self.max_attempts):
            try:
                console.print(f"  [dim]{label}: attempt {attempt + 1}/{self.max_attempts}[/dim]")
                return fn()
            except Exception as e:
                last_error = e
                console.print(f"  [yellow]⚠ {label} attempt {attempt + 1} failed: {escape(str(e))}[/yellow]")

                if not self.is_retryable(e):
                    break
                if attempt + 1 >= self.max_attempts:
                    break

                wait_ms = self.delay_ms(attempt)
                console.print(f"  [dim]{label}: waiting {wait_ms}ms before retry...[/dim]")
                self.sleep(wait_ms / 1000)

        console.print(f"  [red]✗ {label}: giving up[/red]")
        # max_attempts >= 1, so at least one error was recorded
        raise last_error
