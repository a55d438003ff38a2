"""
Structured logging for localpass.

Console and optional file output, plus counters for rendered and
rejected passes so a CLI session can report what it did.
"""

import logging
import sys
import threading
from pathlib import Path
from typing import Optional
from datetime import datetime
import json


class StructuredLogger:
    """
    Centralized logger with support for console and file outputs.
    Tracks pass rendering metrics.
    """

    def __init__(
        self,
        name: str = "localpass",
        level: str = "WARNING",
        log_dir: Optional[Path] = None,
        enable_file: bool = False,
        enable_console: bool = True,
    ):
        """
        Initialize the structured logger.

        Args:
            name: Logger name
            level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
            log_dir: Directory for log files (default: logs/)
            enable_file: Write logs to file
            enable_console: Output logs to stderr
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(logging.DEBUG if enable_file else getattr(logging, level.upper()))
        self.logger.handlers.clear()  # Remove existing handlers
        self.logger.propagate = False

        self.metrics = {
            "passes_requested": 0,
            "passes_rendered": 0,
            "passes_rejected": 0,
            "rejections_by_reason": {},
            "passes_by_class": {},
        }

        # Console goes to stderr so stdout carries only the pass text
        if enable_console:
            console_handler = logging.StreamHandler(sys.stderr)
            console_handler.setLevel(getattr(logging, level.upper()))
            console_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            console_handler.setFormatter(console_formatter)
            self.logger.addHandler(console_handler)

        if enable_file:
            if log_dir is None:
                log_dir = Path("logs")
            log_dir.mkdir(parents=True, exist_ok=True)

            log_file = log_dir / f"localpass_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setLevel(logging.DEBUG)  # Always log everything to file
            file_formatter = logging.Formatter(
                fmt='%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            )
            file_handler.setFormatter(file_formatter)
            self.logger.addHandler(file_handler)

    def debug(self, message: str, **kwargs):
        """Log debug message with optional context."""
        self._log(logging.DEBUG, message, kwargs)

    def info(self, message: str, **kwargs):
        """Log info message with optional context."""
        self._log(logging.INFO, message, kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message with optional context."""
        self._log(logging.WARNING, message, kwargs)

    def error(self, message: str, **kwargs):
        """Log error message with optional context."""
        self._log(logging.ERROR, message, kwargs)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    # Metric tracking methods

    def record_pass_requested(self):
        self.metrics["passes_requested"] += 1

    def record_pass_rendered(self, class_type: str):
        """Record a rendered pass for a class (first/second)."""
        self.metrics["passes_rendered"] += 1
        by_class = self.metrics["passes_by_class"]
        by_class[class_type] = by_class.get(class_type, 0) + 1

    def record_pass_rejected(self, reason: str):
        """Record a rejected input by reason."""
        self.metrics["passes_rejected"] += 1
        by_reason = self.metrics["rejections_by_reason"]
        by_reason[reason] = by_reason.get(reason, 0) + 1

    def get_metrics(self) -> dict:
        """Return current metrics."""
        metrics_copy = dict(self.metrics)
        requested = metrics_copy["passes_requested"]
        metrics_copy["rejection_rate"] = (
            round(metrics_copy["passes_rejected"] / requested, 3) if requested else 0.0
        )
        return metrics_copy

    def log_metrics_summary(self):
        """Log a summary of current metrics."""
        metrics = self.get_metrics()

        self.info("=== Pass Session Metrics ===")
        self.info(
            f"Passes: {metrics['passes_rendered']} rendered, "
            f"{metrics['passes_rejected']} rejected of {metrics['passes_requested']}"
        )

        if metrics["passes_by_class"]:
            self.info("By Class:")
            for class_type, count in metrics["passes_by_class"].items():
                self.info(f"  {class_type}: {count}")

        if metrics["rejections_by_reason"]:
            self.info("Rejection Reasons:")
            for reason, count in metrics["rejections_by_reason"].items():
                self.info(f"  {reason}: {count}")


# Global logger instance
_global_logger: Optional[StructuredLogger] = None
_global_lock = threading.Lock()


def get_logger(
    name: str = "localpass",
    level: str = "WARNING",
    **kwargs
) -> StructuredLogger:
    """
    Get or create the global logger instance.

    Args:
        name: Logger name
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        **kwargs: Additional arguments passed to StructuredLogger

    Returns:
        StructuredLogger instance
    """
    global _global_logger

    with _global_lock:
        if _global_logger is None:
            _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Reset the global logger (useful for testing)."""
    global _global_logger
    _global_logger = None
