"""
Custom exception definitions.

This module defines the exception hierarchy for namegen-specific errors.
Every error raised by the naming pipeline is fatal to the generation run:
none of them describe a transient condition worth retrying.
"""

from typing import Any, Optional


class NamegenError(Exception):
    """
    Base exception for all namegen-related errors.

    This is the root exception class for all namegen-specific
    errors, providing common functionality and error handling.
    """

    def __init__(self, message: str, details: Optional[dict] = None):
        """
        Initialize namegen error.

        Args:
            message: Human-readable error message
            details: Optional dictionary with additional error context
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class NamingError(NamegenError):
    """
    Raised when an identifier cannot be produced.

    Covers base generator failures, empty base output and input that
    normalizes to nothing. The slot and offending value are kept so the
    failing schema entity can be located.
    """

    def __init__(self, slot: Any, value: Any, reason: str = ""):
        """
        Initialize naming error.

        Args:
            slot: Generator slot (a GeneratorSlot or its name)
            value: Input value that could not be named
            reason: Optional explanation of the failure
        """
        slot_name = getattr(slot, "value", slot)
        message = f"{slot_name} name generation failed for {value!r}"
        if reason:
            message += f": {reason}"

        super().__init__(message, {"slot": slot_name, "value": repr(value)})
        self.slot = slot
        self.value = value
        self.reason = reason


class PluginError(NamegenError):
    """
    Base class for failures while resolving a generator type descriptor.
    """

    def __init__(self, descriptor: str, reason: str = ""):
        """
        Initialize plugin error.

        Args:
            descriptor: Type descriptor being resolved
            reason: Optional explanation of the failure
        """
        message = f"Cannot resolve generator type '{descriptor}'"
        if reason:
            message += f": {reason}"

        super().__init__(message, {"descriptor": descriptor})
        self.descriptor = descriptor
        self.reason = reason


class AssemblyLoadError(PluginError):
    """Raised when the assembly named by a descriptor cannot be found or loaded."""

    def __init__(self, descriptor: str, assembly: str, reason: str = ""):
        super().__init__(descriptor, reason or f"assembly '{assembly}' could not be loaded")
        self.details["assembly"] = assembly
        self.assembly = assembly


class TypeNotFoundError(PluginError):
    """Raised when the type named by a descriptor does not exist."""

    def __init__(self, descriptor: str, type_name: str, reason: str = ""):
        super().__init__(descriptor, reason or f"type '{type_name}' not found")
        self.details["type_name"] = type_name
        self.type_name = type_name


class InstantiationError(PluginError):
    """Raised when a resolved type cannot be constructed without arguments."""

    def __init__(self, descriptor: str, type_name: str, reason: str = ""):
        super().__init__(descriptor, reason or f"type '{type_name}' could not be instantiated")
        self.details["type_name"] = type_name
        self.type_name = type_name


class InterfaceMismatchError(PluginError):
    """Raised when a resolved instance does not implement the requested contract."""

    def __init__(self, descriptor: str, type_name: str, contract: str):
        super().__init__(descriptor, f"type '{type_name}' does not implement {contract}")
        self.details["type_name"] = type_name
        self.details["contract"] = contract
        self.type_name = type_name
        self.contract = contract


class PipelineStateError(NamegenError):
    """
    Raised when the pipeline is reconfigured after generation has started.

    Generator slots are fixed once the first identifier has been produced.
    """

    def __init__(self, message: str, slot: Optional[str] = None):
        details = {}
        if slot is not None:
            details["slot"] = slot

        super().__init__(message, details)
        self.slot = slot
