"""
Declaration Registry

Holds the named option declarations in registration order.

RULES:
    - Names are unique. A conflicting add is rejected, reported to the
      logger, and leaves the existing declaration in place.
    - Names in the compiler namespace are reserved. They are only
      settable in bulk through Options.set_compiler_options and can
      never be declared.
    - Lookup and removal never raise.
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional

from .declarations import DeclarationOption
from .errors import DuplicateDeclarationError, ReservedCategoryError
from .logger import Reporter

log = logging.getLogger(__name__)


COMPILER_OPTION_NAMES = frozenset({
    "allowJs",
    "baseUrl",
    "checkJs",
    "composite",
    "declaration",
    "declarationMap",
    "esModuleInterop",
    "experimentalDecorators",
    "incremental",
    "jsx",
    "lib",
    "module",
    "moduleResolution",
    "noEmit",
    "noImplicitAny",
    "outDir",
    "paths",
    "resolveJsonModule",
    "rootDir",
    "rootDirs",
    "skipLibCheck",
    "sourceMap",
    "strict",
    "target",
    "typeRoots",
    "types",
})


class DeclarationRegistry:
    """
    Named declarations with uniqueness enforced.

    Args:
        reporter: Receives recoverable declaration errors
        compiler_option_names: Reserved names (defaults to COMPILER_OPTION_NAMES)
    """

    def __init__(
        self,
        reporter: Reporter,
        compiler_option_names: Optional[Iterable[str]] = None,
    ):
        self.reporter = reporter
        self.compiler_option_names = frozenset(
            COMPILER_OPTION_NAMES if compiler_option_names is None else compiler_option_names
        )
        self._declarations: Dict[str, DeclarationOption] = {}

    def is_compiler_option(self, name: str) -> bool:
        return name in self.compiler_option_names

    def add(self, declaration: DeclarationOption) -> bool:
        """
        Register a declaration.

        Args:
            declaration: The option to register

        Returns:
            True if registered, False if rejected (the reason is reported)
        """
        name = declaration.name

        if self.is_compiler_option(name):
            error = ReservedCategoryError(
                name, f"The option {name} is reserved for compiler options and cannot be declared"
            )
            self.reporter.error(str(error))
            return False

        if name in self._declarations:
            self.reporter.error(str(DuplicateDeclarationError(name)))
            return False

        self._declarations[name] = declaration
        return True

    def remove_by_name(self, name: str) -> Optional[DeclarationOption]:
        """Remove a declaration. Removing an absent name does nothing."""
        removed = self._declarations.pop(name, None)
        if removed is not None:
            log.debug("Removed option declaration %s", name)
        return removed

    def get(self, name: str) -> Optional[DeclarationOption]:
        return self._declarations.get(name)

    def get_all(self) -> List[DeclarationOption]:
        return list(self._declarations.values())

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __iter__(self) -> Iterator[DeclarationOption]:
        return iter(list(self._declarations.values()))

    def __len__(self) -> int:
        return len(self._declarations)


__all__ = ["COMPILER_OPTION_NAMES", "DeclarationRegistry"]
