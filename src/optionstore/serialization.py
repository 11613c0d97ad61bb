"""
Serialization helpers for option declarations and option snapshots.

Produces a stable dict representation of the declared options and their
current values, and renders it as JSON or YAML. Used for dumping the
resolved configuration (e.g. the showConfig option) and for comparing
configurations between runs.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from optionstore.declarations import (
    DeclarationOption,
    MapDeclarationOption,
    NumberDeclarationOption,
    ParameterHint,
    ParameterType,
    create_declaration,
)
from optionstore.options import Options


def declaration_to_dict(d: DeclarationOption) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "name": d.name,
        "help": d.help,
        "type": d.type.value,
        "default_value": d.default,
    }
    if isinstance(d, NumberDeclarationOption):
        out["min_value"] = d.min_value
        out["max_value"] = d.max_value
    if isinstance(d, MapDeclarationOption):
        out["map"] = dict(d.map)
    hint = getattr(d, "hint", None)
    if hint is not None:
        out["hint"] = hint.value
    return out


def declaration_from_dict(d: Dict[str, Any]) -> DeclarationOption:
    kind = ParameterType(d.get("type", ParameterType.STRING.value))
    constraints: Dict[str, Any] = {}
    if "default_value" in d:
        constraints["default_value"] = d["default_value"]
    if kind is ParameterType.NUMBER:
        constraints["min_value"] = d.get("min_value")
        constraints["max_value"] = d.get("max_value")
    if kind is ParameterType.MAP:
        constraints["map"] = dict(d.get("map", {}))
    if d.get("hint") is not None:
        constraints["hint"] = ParameterHint(d["hint"])
    return create_declaration(d["name"], d.get("help", ""), kind, **constraints)


def options_to_dict(o: Options) -> Dict[str, Any]:
    return {
        "frozen": o.is_frozen(),
        "declarations": [declaration_to_dict(d) for d in o.get_declarations()],
        "values": o.get_raw_values(),
        "set": sorted(d.name for d in o.get_declarations() if o.is_set(d.name)),
        "compiler": {
            "files": o.get_file_names(),
            "options": o.get_compiler_options(),
            "project_references": o.get_project_references(),
        },
    }


def values_to_json(o: Options) -> str:
    return json.dumps(o.get_raw_values(), sort_keys=True)


def options_to_json(o: Options) -> str:
    return json.dumps(options_to_dict(o), sort_keys=True)


def options_to_yaml(o: Options) -> str:
    return yaml.safe_dump(options_to_dict(o))
