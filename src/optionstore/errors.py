"""
Error taxonomy for the option store.

Two propagation policies apply:
    - Declaration-time problems (duplicate names, reserved names) are
      REPORTED to the logger and never raised. One bad declaration must
      not abort startup.
    - Runtime value problems (unknown name, frozen mutation, invalid value)
      are RAISED at the call site. They indicate a caller defect.
"""

from typing import Any, Optional


class OptionsError(Exception):
    """Base class for every error raised by the option store."""
    pass


class DuplicateDeclarationError(OptionsError):
    """
    A declaration was added under a name that already exists.

    Never raised by the registry. Only its message is reported.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"The option {name} has already been registered by another declaration"
        )


class UnknownOptionError(OptionsError, KeyError):
    """A read, write or introspection referenced an undeclared option."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown option '{self.name}'"


class ReservedCategoryError(OptionsError):
    """A compiler-reserved option was used through the generic path."""

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(
            message
            or f"Tried to access compiler option '{self.name}' through the generic "
               f"option accessors, use get_compiler_options instead"
        )


class FrozenError(OptionsError):
    """A mutation was attempted after the store was frozen."""

    def __init__(self, operation: str, name: Optional[str] = None):
        self.operation = operation
        self.name = name
        target = f" '{name}'" if name else ""
        super().__init__(f"Tried to {operation}{target} after options have been frozen")


class InvalidValueError(OptionsError, ValueError):
    """A value failed kind-specific validation and was not stored."""

    def __init__(self, name: str, value: Any, reason: str):
        self.name = name
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid value {value!r} for option '{name}': {reason}")


__all__ = [
    "OptionsError",
    "DuplicateDeclarationError",
    "UnknownOptionError",
    "ReservedCategoryError",
    "FrozenError",
    "InvalidValueError",
]
