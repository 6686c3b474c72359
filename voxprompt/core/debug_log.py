"""
Debug logging for AI-enhanced prompt generation.

When VP_DEBUG=1, every LLM request, response and fallback is written as a JSON
file under {root}/.voxprompt/debug/session_<timestamp>/ so a generation run can
be inspected afterwards.
"""

import json
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional


def is_debug_enabled() -> bool:
    """True if VP_DEBUG=1 is set."""
    return os.getenv("VP_DEBUG", "0") == "1"


class DebugLogger:
    """
    Writes one JSON record per LLM event for a generation session.

    Nothing is written, and no directory is created, unless logging is enabled.
    """

    def __init__(self, root: str = ".", enabled: Optional[bool] = None):
        """
        Initialize debug logger.

        Args:
            root: Directory under which .voxprompt/debug is created
            enabled: Override debug enable flag, uses VP_DEBUG env var if None
        """
        self.root = root
        self.enabled = enabled if enabled is not None else is_debug_enabled()
        self.session_id = datetime.now().strftime("%Y%m%d_%H%M%S")
        self.session_dir: Optional[Path] = None

        if self.enabled:
            self.session_dir = Path(root) / ".voxprompt" / "debug" / f"session_{self.session_id}"
            self.session_dir.mkdir(parents=True, exist_ok=True)

    def is_enabled(self) -> bool:
        return self.enabled

    def _write(self, step: str, payload: Dict[str, Any]) -> None:
        if not self.enabled or self.session_dir is None:
            return

        timestamp = datetime.now().isoformat()
        record = {"timestamp": timestamp, "session_id": self.session_id, "step": step, **payload}
        filename = f"{step}_{timestamp.replace(':', '-').replace('.', '_')}.json"

        with open(self.session_dir / filename, "w", encoding="utf-8") as f:
            json.dump(record, f, indent=2, ensure_ascii=False, default=str)

    def log_llm_request(self, system_prompt: str, user_prompt: str, params: Dict[str, Any]) -> None:
        """
        Log the prompts and request parameters sent to the model.

        Args:
            system_prompt: System message content
            user_prompt: User message content
            params: Request parameters other than the messages
        """
        self._write(
            "llm_request",
            {
                "system_prompt": system_prompt,
                "user_prompt": user_prompt,
                "params": {k: v for k, v in params.items() if k != "messages"},
            },
        )

    def log_llm_response(self, content: str, transcript: str) -> None:
        """Log the raw model response next to the transcript it was generated from."""
        self._write(
            "llm_response",
            {
                "response_content": content,
                "transcript": transcript,
                "response_length": len(content),
                "transcript_length": len(transcript),
            },
        )

    def log_fallback(self, error: Exception, options: Dict[str, Any]) -> None:
        """
        Log why the AI-enhanced path was abandoned for the deterministic builder.

        Args:
            error: Exception raised by the AI attempt
            options: Generation options, as a dict
        """
        self._write(
            "fallback",
            {
                "error": str(error),
                "error_type": type(error).__name__,
                "options": options,
            },
        )


# Global debug logger instance
_debug_logger: Optional[DebugLogger] = None


def get_debug_logger(root: str = ".") -> DebugLogger:
    """
    Get or create the global debug logger for a root directory.

    Args:
        root: Directory for log storage

    Returns:
        DebugLogger instance
    """
    global _debug_logger
    if _debug_logger is None or _debug_logger.root != root or _debug_logger.enabled != is_debug_enabled():
        _debug_logger = DebugLogger(root)
    return _debug_logger
