"""Colored write logger — ANSI-colored console logging for article writes.

Provides a WriteLogger with color-coded output per write stage, making it
easy to follow a create/update/delete request in the terminal.

Color scheme:
    🟢 Green   — Upload / Storage
    🔵 Blue    — Repository mutation
    🔴 Red     — Errors
    ⚪ Gray    — Timing
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
    BLUE = "\033[94m"
    GRAY = "\033[90m"


# ── Write Stage Definitions ──────────────────────────────────────────

class WriteStage:
    """Predefined write stages with colors and icons."""

    UPLOAD = ("UPLOAD", _Colors.GREEN, "📁")
    STORAGE = ("STORAGE", _Colors.GREEN, "💾")
    REPOSITORY = ("REPOSITORY", _Colors.BLUE, "🗂️")
    COMPLETE = ("COMPLETE", _Colors.GREEN, "✅")


def _format_details(kwargs: dict[str, Any]) -> str:
    return " | ".join(f"{k}={v}" for k, v in kwargs.items())


# ── WriteLogger ──────────────────────────────────────────────────────

class WriteLogger:
    """Color-coded logger for article write operations.

    Usage:
        log = WriteLogger("ArticleService")
        log.step_start(WriteStage.STORAGE, "Saving cover.png")
        log.step_complete(WriteStage.STORAGE, "Stored at /uploads/1700000000000_cover.png")
    """

    def __init__(self, component_name: str):
        self._logger = logging.getLogger(component_name)

    def step_start(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log the start of a write step with its stage color."""
        label, color, icon = stage
        formatted = (
            f"{color}{_Colors.BOLD}{icon} [{label}]{_Colors.RESET} "
            f"{color}{message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_details(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_complete(self, stage: tuple[str, str, str], message: str, **kwargs: Any) -> None:
        """Log the successful completion of a write step."""
        label, color, icon = stage
        formatted = (
            f"{color}{icon} [{label}]{_Colors.RESET} "
            f"{_Colors.GREEN}✓ {message}{_Colors.RESET}"
        )
        if kwargs:
            formatted += f" {_Colors.GRAY}({_format_details(kwargs)}){_Colors.RESET}"
        self._logger.info(formatted)

    def step_error(self, stage: tuple[str, str, str], message: str, error: Exception | None = None) -> None:
        """Log a rejected write step in red.

        Rejections are client errors, so they go out at WARNING.
        """
        label = stage[0]
        formatted = (
            f"{_Colors.RED}{_Colors.BOLD}❌ [{label}]{_Colors.RESET} "
            f"{_Colors.RED}{message}{_Colors.RESET}"
        )
        if error:
            formatted += f" {_Colors.DIM}→ {type(error).__name__}: {error}{_Colors.RESET}"
        self._logger.warning(formatted)

    @contextmanager
    def timed_step(self, stage: tuple[str, str, str], message: str, **kwargs: Any):
        """Context manager that logs start/end with elapsed time.

        Usage:
            with log.timed_step(WriteStage.REPOSITORY, "Creating article"):
                article = await repository.create(article)
        """
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
            self.step_complete(stage, f"{message} — {elapsed * 1000:.1f}ms")
