#!/usr/bin/env python3
"""
Options Lifecycle Demo: Declare → Set → Freeze → Bound Reads

Shows the full workflow:
1. Declare the stock options plus a custom one
2. Set values (including a rejected one)
3. Freeze the store
4. Read through bound attributes
5. Dump the resolved configuration
"""

import logging

from optionstore import (
    BindOption,
    FrozenError,
    InvalidValueError,
    Logger,
    NumberDeclarationOption,
    Options,
)
from optionstore.serialization import options_to_yaml


class Renderer:
    emit = BindOption("emit")
    theme = BindOption("theme")
    depth = BindOption("maxDepth")

    def __init__(self, options):
        self.options = options


def main():
    logging.basicConfig(level=logging.INFO, format="   %(levelname)s %(name)s: %(message)s")

    print("=" * 80)
    print("OPTIONS LIFECYCLE DEMO")
    print("=" * 80)

    # =========================================================================
    # STEP 1: Declare
    # =========================================================================
    print("\n1. DECLARING OPTIONS...")
    logger = Logger()
    options = Options(logger)
    options.add_default_declarations()
    options.add_declaration(NumberDeclarationOption(
        name="maxDepth", help="Maximum nesting depth.", min_value=1, max_value=10, default_value=3,
    ))
    options.add_declaration(NumberDeclarationOption(name="maxDepth"))
    print(f"   ✓ Declared: {len(options.get_declarations())}")
    print(f"   ✓ Declaration errors reported: {logger.error_count}")

    # =========================================================================
    # STEP 2: Set values
    # =========================================================================
    print("\n2. SETTING VALUES...")
    renderer = Renderer(options)
    options.set_value("emit", True)
    options.set_value("theme", "minimal")
    options.set_compiler_options(["src/index.ts"], {"target": "es2019", "strict": True}, [])
    try:
        options.set_value("maxDepth", 42)
    except InvalidValueError as e:
        print(f"   ✓ Rejected: {e}")
    print(f"   ✓ renderer.emit = {renderer.emit}, renderer.theme = {renderer.theme}")

    # =========================================================================
    # STEP 3: Freeze
    # =========================================================================
    print("\n3. FREEZING...")
    options.freeze()
    try:
        options.set_value("emit", False)
    except FrozenError as e:
        print(f"   ✓ Rejected: {e}")

    # =========================================================================
    # STEP 4: Bound reads
    # =========================================================================
    print("\n4. BOUND READS AFTER FREEZE:")
    print(f"   ✓ renderer.depth = {renderer.depth}")
    print(f"   ✓ Cached on instance: {sorted(vars(renderer))}")

    # =========================================================================
    # STEP 5: Dump
    # =========================================================================
    print("\n5. RESOLVED CONFIGURATION (snapshot):")
    print("-" * 80)
    lines = options_to_yaml(options).split("\n")
    for line in lines[:20]:
        print(f"   {line}")
    if len(lines) > 20:
        print(f"   ... ({len(lines) - 20} more lines)")


if __name__ == "__main__":
    main()
