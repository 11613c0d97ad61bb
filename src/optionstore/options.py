"""
Option Value Store

Options is the root object consumers hold. It owns:
    - A DeclarationRegistry (what options exist)
    - One value slot per declaration, seeded from the declared default
    - The explicit-set flag per slot
    - The compiler-reserved options, set only in bulk
    - The lifecycle state (MUTABLE -> FROZEN, one way)

ARCHITECTURAL RULE:
    Every mutator checks the lifecycle state before doing anything else.
    A failed mutation leaves every slot untouched.
"""

import copy
import logging
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Set

from .declarations import DeclarationOption, convert_value
from .defaults import default_declarations
from .errors import FrozenError, ReservedCategoryError, UnknownOptionError
from .logger import Logger, Reporter
from .registry import DeclarationRegistry

log = logging.getLogger(__name__)


def _detached(value: Any) -> Any:
    """Copy container values so callers cannot edit a slot in place."""
    if isinstance(value, (list, dict, set)):
        return copy.deepcopy(value)
    return value


class LifecycleState(Enum):
    """States of the store. There is no transition back to MUTABLE."""

    MUTABLE = "mutable"
    FROZEN = "frozen"


class Options:
    """
    Registry of declared options plus their current values.

    Args:
        logger: Receives declaration errors (a new Logger when omitted)
        compiler_option_names: Reserved compiler names, see registry.COMPILER_OPTION_NAMES

    Example:
        options = Options()
        options.add_default_declarations()
        options.set_value("emit", True)
        options.freeze()
        options.get_value("emit")  # True
    """

    def __init__(
        self,
        logger: Optional[Reporter] = None,
        compiler_option_names: Optional[Iterable[str]] = None,
    ):
        self.logger = logger if logger is not None else Logger()
        self._registry = DeclarationRegistry(self.logger, compiler_option_names)
        self._values: Dict[str, Any] = {}
        self._set: Set[str] = set()
        self._state = LifecycleState.MUTABLE

        self._compiler_options: Dict[str, Any] = {}
        self._file_names: List[str] = []
        self._project_references: List[Any] = []

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def freeze(self) -> None:
        """Make the store immutable. Calling it again has no effect."""
        if self._state is LifecycleState.MUTABLE:
            log.debug("Freezing options (%d declared)", len(self._registry))
        self._state = LifecycleState.FROZEN

    def is_frozen(self) -> bool:
        return self._state is LifecycleState.FROZEN

    def _assert_mutable(self, operation: str, name: Optional[str] = None) -> None:
        if self._state is LifecycleState.FROZEN:
            raise FrozenError(operation, name)

    # ------------------------------------------------------------------
    # Declarations
    # ------------------------------------------------------------------

    def add_declaration(self, declaration: DeclarationOption) -> None:
        """
        Declare an option and seed its slot with the declared default.

        Duplicate or reserved names are reported to the logger and ignored.
        The default is not validated.

        Allowed after freeze: it only ever creates a new slot, because
        existing names are rejected and removal is refused once frozen.
        """
        if self._registry.add(declaration):
            self._values[declaration.name] = copy.deepcopy(declaration.default)

    def add_declarations(self, declarations: Iterable[DeclarationOption]) -> None:
        for declaration in declarations:
            self.add_declaration(declaration)

    def add_default_declarations(self) -> None:
        """Declare the stock documentation generator options."""
        self.add_declarations(default_declarations())

    def remove_declaration_by_name(self, name: str) -> None:
        """
        Remove a declaration and its value. Absent names are ignored.

        Raises:
            FrozenError: If the store is frozen
        """
        self._assert_mutable("remove option", name)
        if self._registry.remove_by_name(name) is not None:
            self._values.pop(name, None)
            self._set.discard(name)

    def get_declaration(self, name: str) -> Optional[DeclarationOption]:
        return self._registry.get(name)

    def get_declarations(self) -> List[DeclarationOption]:
        return self._registry.get_all()

    # ------------------------------------------------------------------
    # Values
    # ------------------------------------------------------------------

    def _assert_declared(self, name: str) -> DeclarationOption:
        if self._registry.is_compiler_option(name):
            raise ReservedCategoryError(name)
        declaration = self._registry.get(name)
        if declaration is None:
            raise UnknownOptionError(name)
        return declaration

    def get_value(self, name: str) -> Any:
        """
        Get the current value of an option.

        Raises:
            ReservedCategoryError: If name is a compiler option
            UnknownOptionError: If name was never declared
        """
        self._assert_declared(name)
        return _detached(self._values[name])

    def set_value(self, name: str, value: Any) -> None:
        """
        Validate and store a value.

        Raises:
            FrozenError: If the store is frozen
            ReservedCategoryError: If name is a compiler option
            UnknownOptionError: If name was never declared
            InvalidValueError: If the value does not fit the declaration
        """
        self._assert_mutable("set option", name)
        declaration = self._assert_declared(name)

        converted = convert_value(value, declaration)
        self._values[name] = converted
        self._set.add(name)

    def is_set(self, name: str) -> bool:
        """
        Whether set_value has stored a value since declaration or reset.

        Raises:
            UnknownOptionError: If name was never declared
        """
        if name not in self._registry:
            raise UnknownOptionError(name)
        return name in self._set

    def reset(self) -> None:
        """Restore every option to its default and forget compiler options."""
        self._assert_mutable("reset options")

        for declaration in self._registry:
            self._values[declaration.name] = copy.deepcopy(declaration.default)
        self._set.clear()
        self._compiler_options = {}
        self._file_names = []
        self._project_references = []

    def get_raw_values(self) -> Dict[str, Any]:
        """Snapshot of every declared option's current value."""
        return {name: _detached(value) for name, value in self._values.items()}

    # ------------------------------------------------------------------
    # Compiler options
    # ------------------------------------------------------------------

    def set_compiler_options(
        self,
        files: Iterable[str],
        compiler_options: Dict[str, Any],
        project_references: Optional[Iterable[Any]] = None,
    ) -> None:
        """
        Replace the compiler options, input files and project references at once.

        Raises:
            FrozenError: If the store is frozen
        """
        self._assert_mutable("set compiler options")

        file_names = list(files)
        options = dict(compiler_options)
        references = list(project_references or [])

        self._file_names = file_names
        self._compiler_options = options
        self._project_references = references

    def get_compiler_options(self) -> Dict[str, Any]:
        return dict(self._compiler_options)

    def get_file_names(self) -> List[str]:
        return list(self._file_names)

    def get_project_references(self) -> List[Any]:
        return list(self._project_references)


__all__ = ["LifecycleState", "Options"]
