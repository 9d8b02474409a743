"""
Logging configuration and utilities.

This module provides centralized logging configuration for the
namegen package with appropriate formatting and levels.
"""

import logging
import os
from typing import Optional

from .constants import ENV_LOG_LEVEL


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the namegen package.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
    """
    # Determine log level
    if level is None:
        level = os.environ.get(ENV_LOG_LEVEL, "INFO")

    log_level = getattr(logging, level.upper(), logging.INFO)

    # Configure root logger for namegen
    logger = logging.getLogger("namegen")
    logger.setLevel(log_level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Prevent propagation to root logger
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    if name == "namegen" or name.startswith("namegen."):
        return logging.getLogger(name)
    return logging.getLogger(f"namegen.{name}")


class NamegenLogger:
    """
    Component logging for the naming pipeline.

    Wraps a module logger with helpers for the events worth tracing
    during a generation run: plugin loading, slot overrides and
    naming failures.
    """

    def __init__(self, name: str):
        """
        Initialize logger for specific component.

        Args:
            name: Component name for logging context
        """
        self.logger = get_logger(name)

    def log_assembly_loaded(self, assembly: str, module_name: str) -> None:
        """
        Log a plugin assembly being loaded into the process.

        Args:
            assembly: Assembly path or module name from the descriptor
            module_name: Name the module was registered under
        """
        self.logger.info(f"Loaded plugin assembly '{assembly}' as module '{module_name}'")

    def log_override_applied(self, slot: str, descriptor: str, instance: object) -> None:
        """
        Log a generator slot being replaced by a plugin instance.

        Args:
            slot: Slot name (Enum, Type or Property)
            descriptor: Type descriptor that was resolved
            instance: The instance now occupying the slot
        """
        self.logger.info(
            f"{slot} name generator overridden by {type(instance).__name__} ('{descriptor}')"
        )

    def log_naming_failure(self, slot: str, value: object, reason: str) -> None:
        """
        Log an identifier that could not be produced.

        Args:
            slot: Slot name (Enum, Type or Property)
            value: Offending input value
            reason: Explanation of the failure
        """
        self.logger.error(f"{slot} naming failed for {value!r}: {reason}")

    def log_slot_defaults(self, slots: dict) -> None:
        """
        Log the generator classes wired into each slot.

        Args:
            slots: Mapping of slot name to generator instance
        """
        summary = ", ".join(f"{name}={type(gen).__name__}" for name, gen in slots.items())
        self.logger.debug(f"Generator slots: {summary}")


# Initialize logging on module import
setup_logging()
