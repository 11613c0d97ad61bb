"""
optionstore: Declarative Option Registry and Value Store

Producers declare named, typed options. The store validates and keeps
their values, freezes once, and feeds bound attributes on consumer objects.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Command line parsing
    - Configuration file formats
    - What the options mean to their consumers

Loaders call add_declaration / set_value / set_compiler_options and then
freeze. Everything downstream only reads.
"""

from .binder import BindOption, bind_option
from .declarations import (
    ArrayDeclarationOption,
    BooleanDeclarationOption,
    DeclarationOption,
    MapDeclarationOption,
    MixedDeclarationOption,
    NumberDeclarationOption,
    ParameterHint,
    ParameterType,
    PathDeclarationOption,
    StringDeclarationOption,
    create_declaration,
)
from .errors import (
    DuplicateDeclarationError,
    FrozenError,
    InvalidValueError,
    OptionsError,
    ReservedCategoryError,
    UnknownOptionError,
)
from .logger import Logger, Reporter
from .options import LifecycleState, Options
from .registry import COMPILER_OPTION_NAMES, DeclarationRegistry

__version__ = "0.1.0"

__all__ = [
    "Options",
    "LifecycleState",
    "DeclarationRegistry",
    "COMPILER_OPTION_NAMES",
    "BindOption",
    "bind_option",
    "Logger",
    "Reporter",
    "ParameterType",
    "ParameterHint",
    "DeclarationOption",
    "StringDeclarationOption",
    "PathDeclarationOption",
    "BooleanDeclarationOption",
    "NumberDeclarationOption",
    "ArrayDeclarationOption",
    "MixedDeclarationOption",
    "MapDeclarationOption",
    "create_declaration",
    "OptionsError",
    "DuplicateDeclarationError",
    "UnknownOptionError",
    "ReservedCategoryError",
    "FrozenError",
    "InvalidValueError",
]
