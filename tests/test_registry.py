"""
Tests for the declaration registry.

These tests verify:
    - Registration and lookup
    - Duplicate names are reported, not raised
    - Compiler names cannot be declared
    - Idempotent removal
"""

import pytest

from optionstore import (
    BooleanDeclarationOption,
    COMPILER_OPTION_NAMES,
    DeclarationRegistry,
    Logger,
    StringDeclarationOption,
)


@pytest.fixture
def registry(logger):
    return DeclarationRegistry(logger)


class TestAdd:
    """Test registering declarations."""

    def test_add_and_get(self, registry):
        """Should return the registered declaration by name."""
        decl = BooleanDeclarationOption(name="emit")
        assert registry.add(decl) is True
        assert registry.get("emit") is decl
        assert "emit" in registry
        assert len(registry) == 1

    def test_get_missing_returns_none(self, registry):
        """Should return None for unknown names instead of raising."""
        assert registry.get("nope") is None

    def test_duplicate_is_reported(self, registry, logger):
        """Should keep the first declaration and report an error."""
        first = BooleanDeclarationOption(name="help")
        second = StringDeclarationOption(name="help", default_value="x")
        registry.add(first)

        assert registry.add(second) is False
        assert registry.get("help") is first
        assert logger.has_errors()
        assert logger.error_count == 1

    def test_compiler_name_is_rejected(self, registry, logger):
        """Should refuse to declare names in the compiler namespace."""
        assert "target" in COMPILER_OPTION_NAMES
        assert registry.add(StringDeclarationOption(name="target")) is False
        assert registry.get("target") is None
        assert logger.has_errors()

    def test_custom_compiler_namespace(self):
        """Should honor a caller supplied compiler namespace."""
        logger = Logger()
        registry = DeclarationRegistry(logger, compiler_option_names={"cflags"})
        assert registry.add(StringDeclarationOption(name="target")) is True
        assert registry.add(StringDeclarationOption(name="cflags")) is False
        assert registry.is_compiler_option("cflags")
        assert not registry.is_compiler_option("target")

    def test_registration_order(self, registry):
        """Should list declarations in the order they were added."""
        for name in ["b", "a", "c"]:
            registry.add(StringDeclarationOption(name=name))
        assert [d.name for d in registry.get_all()] == ["b", "a", "c"]
        assert [d.name for d in registry] == ["b", "a", "c"]


class TestRemove:
    """Test removing declarations."""

    def test_remove_existing(self, registry):
        """Should remove and return the declaration."""
        decl = StringDeclarationOption(name="not-an-option")
        registry.add(decl)
        assert registry.remove_by_name("not-an-option") is decl
        assert registry.get("not-an-option") is None

    def test_remove_missing_is_noop(self, registry, logger):
        """Should ignore removal of names that were never declared."""
        assert registry.remove_by_name("not-an-option") is None
        assert not logger.has_errors()

    def test_readd_after_remove(self, registry, logger):
        """Should allow declaring a name again once removed."""
        registry.add(StringDeclarationOption(name="x"))
        registry.remove_by_name("x")
        assert registry.add(StringDeclarationOption(name="x")) is True
        assert not logger.has_errors()
