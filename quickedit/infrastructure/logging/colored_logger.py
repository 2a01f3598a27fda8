"""Colored edit logger — ANSI-colored console logging for the quick edit pipeline.

Each stage of an edit gets its own color so a request can be traced in the
terminal from name resolution to the final flush.

Color scheme:
    🔵 Blue    — Resolve / Fetch
    🟡 Yellow  — Validate
    🟣 Magenta — Coerce / Invoke
    🟢 Green   — Persist / Complete
    🔴 Red     — Errors
"""

import logging
import time
from contextlib import contextmanager
from typing import Any


# ── ANSI Color Codes ─────────────────────────────────────────────────

class _Colors:
    """ANSI escape codes for terminal colors."""

    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    BLUE = "\033[94m"
    MAGENTA = "\033[95m"
    GRAY = "\033[90m"


# ── Edit Stage Definitions ───────────────────────────────────────────

class EditStage:
    """Stages of a quick edit with their colors and icons."""

    RESOLVE = ("RESOLVE", _Colors.BLUE, "🔎")
    FETCH = ("FETCH", _Colors.BLUE, "📥")
    VALIDATE = ("VALIDATE", _Colors.YELLOW, "🛡️")
    COERCE = ("COERCE", _Colors.MAGENTA, "🔁")
    INVOKE = ("INVOKE", _Colors.MAGENTA, "✏️")
    PERSIST = ("PERSIST", _Colors.GREEN, "💾")
    COMPLETE = ("COMPLETE", _Colors.GREEN, "✅")


def _format_kwargs(kwargs: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in kwargs.items())


# ── EditLogger ───────────────────────────────────────────────────────

class EditLogger:
    """Color-coded logger for quick edit requests.

    Usage:
        log = EditLogger("QuickEditService")
        with log.timed_step(EditStage.FETCH, "Loading record", id="10"):
            records = await store.fetch(descriptor, "10")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_kwargs(kwargs)}){_Colors.RESET}"
        self._logger.debug(formatted)

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_kwargs(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a failed stage in red. Client errors are warnings, not server errors."""
        label, _, icon = stage
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Log start/end of a stage with the elapsed time; failures are logged and re-raised."""
        self.step_start(stage, message, **kwargs)
        start = time.perf_counter()
        try:
            yield
        except Exception as e:
            elapsed = time.perf_counter() - start
            self.step_error(stage, f"{message} — failed after {elapsed * 1000:.1f}ms", error=e)
            raise
        else:
            elapsed = time.perf_counter() - start
            self.step_complete(stage, f"{message} — {elapsed * 1000:.1f}ms", **kwargs)
