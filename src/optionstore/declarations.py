"""
Option Declarations

Defines the closed set of option kinds and the declaration objects
producers hand to the registry:
    - ParameterType (the kind tag)
    - ParameterHint (informational file/directory hint)
    - One declaration dataclass per kind
    - convert_value (kind-specific validation of values passed to set_value)

ARCHITECTURAL RULE:
    Declarations are metadata only.
    A declaration's default_value is NEVER validated. Defaults may lie
    outside a number's range or outside a map's values. Only values
    written through set_value go through convert_value.
"""

import math
import os
from dataclasses import dataclass, field
from enum import Enum
from numbers import Real
from typing import Any, Dict, List, Mapping, Optional, Union

from .errors import InvalidValueError


class ParameterType(Enum):
    """
    Kinds of option supported by the store.

    Keep this closed. Every kind here must have a conversion rule
    in convert_value.
    """

    STRING = "string"
    PATH = "path"
    NUMBER = "number"
    BOOLEAN = "boolean"
    MAP = "map"
    MIXED = "mixed"
    ARRAY = "array"


_KIND_DEFAULTS: Dict[ParameterType, Any] = {
    ParameterType.STRING: "",
    ParameterType.PATH: "",
    ParameterType.NUMBER: 0,
    ParameterType.BOOLEAN: False,
    ParameterType.MIXED: None,
}


class ParameterHint(Enum):
    """Hint for how a string or path option should be interpreted."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class DeclarationOption:
    """
    Base declaration shared by every kind.

    Properties:
        name:
            Unique option name, immutable after registration
            Examples: "emit", "excludePrivate", "logLevel"

        help:
            Human-readable description, no behavioral effect

        type:
            ParameterType tag. Subclasses pin this to their kind.
    """

    name: str
    help: str = ""
    type: ParameterType = ParameterType.STRING

    @property
    def default(self) -> Any:
        """The value a fresh store slot is seeded with."""
        if hasattr(self, "default_value"):
            return self.default_value
        return _KIND_DEFAULTS.get(self.type)


@dataclass
class StringDeclarationOption(DeclarationOption):
    """A free-form string option."""

    type: ParameterType = ParameterType.STRING
    default_value: str = ""
    hint: Optional[ParameterHint] = None


@dataclass
class PathDeclarationOption(DeclarationOption):
    """A filesystem path, resolved to an absolute path on set."""

    type: ParameterType = ParameterType.PATH
    default_value: str = ""
    hint: Optional[ParameterHint] = None


@dataclass
class BooleanDeclarationOption(DeclarationOption):
    """An on/off flag."""

    type: ParameterType = ParameterType.BOOLEAN
    default_value: bool = False


@dataclass
class NumberDeclarationOption(DeclarationOption):
    """
    A numeric option with optional inclusive bounds.

    Properties:
        min_value: Lowest value accepted by set_value (optional)
        max_value: Highest value accepted by set_value (optional)

    IMPORTANT:
        The bounds are not applied to default_value.
    """

    type: ParameterType = ParameterType.NUMBER
    default_value: Union[int, float] = 0
    min_value: Optional[Union[int, float]] = None
    max_value: Optional[Union[int, float]] = None


@dataclass
class ArrayDeclarationOption(DeclarationOption):
    """An ordered list of strings."""

    type: ParameterType = ParameterType.ARRAY
    default_value: List[str] = field(default_factory=list)


@dataclass
class MixedDeclarationOption(DeclarationOption):
    """An option accepting any value. No validation is applied."""

    type: ParameterType = ParameterType.MIXED
    default_value: Any = None


@dataclass
class MapDeclarationOption(DeclarationOption):
    """
    An enumerated option.

    Properties:
        map:
            Key -> legal value mapping. set_value accepts either a key
            (string keys match case-insensitively) or one of the values.

        default_value:
            Required. Need not be one of the map's values.

    Example:
        MapDeclarationOption(
            name="logLevel",
            map={"Verbose": 0, "Info": 1, "Warn": 2, "Error": 3},
            default_value=1,
        )
    """

    type: ParameterType = ParameterType.MAP
    map: Mapping[str, Any] = field(default_factory=dict)
    default_value: Any = None


_DECLARATION_CLASSES: Dict[ParameterType, type] = {
    ParameterType.STRING: StringDeclarationOption,
    ParameterType.PATH: PathDeclarationOption,
    ParameterType.BOOLEAN: BooleanDeclarationOption,
    ParameterType.NUMBER: NumberDeclarationOption,
    ParameterType.ARRAY: ArrayDeclarationOption,
    ParameterType.MIXED: MixedDeclarationOption,
    ParameterType.MAP: MapDeclarationOption,
}


def declaration_class_for(kind: ParameterType) -> type:
    """Return the declaration dataclass used for ``kind``."""
    return _DECLARATION_CLASSES[kind]


def create_declaration(
    name: str,
    help: str = "",
    type: ParameterType = ParameterType.STRING,
    **constraints: Any,
) -> DeclarationOption:
    """
    Build the declaration dataclass matching ``type``.

    Args:
        name: Option name
        help: Description
        type: ParameterType (or its string value, e.g. "boolean")
        **constraints: default_value, min_value, max_value, map, hint

    Returns:
        A declaration instance of the kind's class

    Raises:
        TypeError: If a constraint does not belong to the kind
    """
    kind = ParameterType(type)
    return declaration_class_for(kind)(name=name, help=help, **constraints)


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _within_bounds(value: Real, min_value: Optional[Real], max_value: Optional[Real]) -> bool:
    if min_value is not None and value < min_value:
        return False
    if max_value is not None and value > max_value:
        return False
    return True


def _convert_number(value: Any, option: NumberDeclarationOption) -> Union[int, float]:
    if isinstance(value, str):
        try:
            number = int(value.strip(), 10)
        except ValueError:
            try:
                number = float(value.strip())
            except ValueError:
                raise InvalidValueError(option.name, value, "expected a number")
    elif _is_number(value):
        number = value
    else:
        raise InvalidValueError(option.name, value, "expected a number")

    # NaN compares False against both bounds
    if not math.isfinite(number):
        raise InvalidValueError(option.name, value, "expected a finite number")

    min_value = getattr(option, "min_value", None)
    max_value = getattr(option, "max_value", None)
    if not _within_bounds(number, min_value, max_value):
        if min_value is not None and max_value is not None:
            reason = f"must be between {min_value} and {max_value}"
        elif min_value is not None:
            reason = f"must be greater than or equal to {min_value}"
        else:
            reason = f"must be less than or equal to {max_value}"
        raise InvalidValueError(option.name, value, reason)
    return number


def _convert_map(value: Any, option: MapDeclarationOption) -> Any:
    legal = getattr(option, "map", {})
    if isinstance(value, str):
        lowered = value.lower()
        for key, mapped in legal.items():
            if isinstance(key, str) and key.lower() == lowered:
                return mapped

    # Exact type match, so True is not taken for 1
    if any(type(value) is type(v) and value == v for v in legal.values()):
        return value

    keys = ", ".join(f'"{key}"' for key in legal)
    raise InvalidValueError(option.name, value, f"must be one of {keys}")


def _convert_array(value: Any, option: ArrayDeclarationOption) -> List[str]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return list(value)
    raise InvalidValueError(option.name, value, "expected a string or a list of strings")


def _convert_path(value: Any, option: PathDeclarationOption) -> str:
    if isinstance(value, os.PathLike):
        value = os.fspath(value)
    if not isinstance(value, str):
        raise InvalidValueError(option.name, value, "expected a path")
    return os.path.abspath(value) if value else ""


def convert_value(value: Any, option: DeclarationOption) -> Any:
    """
    Validate and normalize a value for ``option``.

    Args:
        value: Value passed to set_value
        option: The option's declaration

    Returns:
        The value to store

    Raises:
        InvalidValueError: If the value does not fit the option's kind
    """
    kind = option.type

    if kind is ParameterType.STRING:
        if not isinstance(value, str):
            raise InvalidValueError(option.name, value, "expected a string")
        return value
    if kind is ParameterType.PATH:
        return _convert_path(value, option)
    if kind is ParameterType.BOOLEAN:
        if not isinstance(value, bool):
            raise InvalidValueError(option.name, value, "expected a boolean")
        return value
    if kind is ParameterType.NUMBER:
        return _convert_number(value, option)
    if kind is ParameterType.ARRAY:
        return _convert_array(value, option)
    if kind is ParameterType.MAP:
        return _convert_map(value, option)
    if kind is ParameterType.MIXED:
        return value

    raise TypeError(f"Unsupported option type: {kind}")


__all__ = [
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
    "declaration_class_for",
    "create_declaration",
    "convert_value",
]
