"""Logging configuration for MitoView reviewer actions.

Provides structured logging for data loads, saved-search edits and settings
persistence, so a review session can be audited afterwards.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any


class ReviewActionLogger:
    """Logger for reviewer actions with structured output."""

    def __init__(self, log_dir: Path | None = None, enable_file_logging: bool = True):
        """Initialize the review action logger.

        Args:
            log_dir: Directory for log files. Defaults to ./logs
            enable_file_logging: Whether to write logs to files
        """
        self.logger = logging.getLogger("mitoview.actions")
        self.logger.setLevel(logging.INFO)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)
        console_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)
        self.logger.addHandler(console_handler)

        self.file_handler = None
        if enable_file_logging:
            if log_dir is None:
                log_dir = Path("./logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            timestamp = datetime.now().strftime("%Y%m%d")
            log_file = log_dir / f"review_actions_{timestamp}.jsonl"

            # JSON lines are written straight to the stream, the handler only owns the file
            self.file_handler = logging.FileHandler(log_file)
            self.file_handler.setLevel(logging.DEBUG)
            self.file_handler.setFormatter(logging.Formatter('%(message)s'))
            self.file_handler.addFilter(lambda record: record.levelno == logging.DEBUG)
            self.logger.addHandler(self.file_handler)

            self.log_file = log_file
            self.logger.info(f"Review action logging enabled: {log_file}")
        else:
            self.log_file = None

    def _write_entry(self, event_type: str, payload: dict[str, Any]) -> None:
        if not self.file_handler:
            return
        log_entry = {
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **payload,
        }
        self.file_handler.stream.write(json.dumps(log_entry) + '\n')
        self.file_handler.flush()

    def log_data_loaded(self, sample: str, variant_count: int, max_read_depth: float) -> None:
        """Log a successful initial load."""
        self.logger.info(
            f"Loaded sample {sample}: {variant_count} variants (max depth: {max_read_depth})"
        )
        self._write_entry("data_loaded", {
            "sample": sample,
            "variant_count": variant_count,
            "max_read_depth": max_read_depth,
        })

    def log_load_error(self, error: BaseException) -> None:
        """Log a failed initial load."""
        self.logger.error(f"Data load failed: {error}")
        self._write_entry("load_error", {
            "error": {"type": type(error).__name__, "message": str(error)},
        })

    def log_search_saved(self, sample: str, name: str, created: bool) -> None:
        """Log a saved search being created or updated."""
        action = "Created" if created else "Updated"
        self.logger.info(f"{action} saved search '{name}' for sample {sample}")
        self._write_entry("search_saved", {"sample": sample, "name": name, "created": created})

    def log_search_deleted(self, sample: str, name: str, removed: int) -> None:
        """Log a saved search being deleted."""
        self.logger.info(f"Deleted saved search '{name}' for sample {sample} ({removed} removed)")
        self._write_entry("search_deleted", {"sample": sample, "name": name, "removed": removed})

    def log_settings_saved(self, sample_count: int) -> None:
        self.logger.info(f"Saved settings for {sample_count} samples")
        self._write_entry("settings_saved", {"sample_count": sample_count})

    def log_settings_error(self, error: BaseException) -> None:
        self.logger.error(f"Saving settings failed: {error}")
        self._write_entry("settings_error", {
            "error": {"type": type(error).__name__, "message": str(error)},
        })

    def log_settings_exported(self, path: Path) -> None:
        self.logger.info(f"Exported settings to {path}")
        self._write_entry("settings_exported", {"path": str(path)})


# Global logger instance
_global_logger: ReviewActionLogger | None = None


def get_logger(log_dir: Path | None = None, enable_file_logging: bool = True) -> ReviewActionLogger:
    """Get or create the global review action logger."""
    global _global_logger

    if _global_logger is None:
        _global_logger = ReviewActionLogger(log_dir=log_dir, enable_file_logging=enable_file_logging)

    return _global_logger


def reset_logger() -> None:
    """Reset the global logger (mainly for testing)."""
    global _global_logger
    _global_logger = None
