"""
Tests for BindOption.

Bound attributes read through to the store until it is frozen, then
become plain instance attributes on first read.
"""

import pytest

from optionstore import BindOption, FrozenError, Logger, Options, bind_option


class Container:
    emit = BindOption("emit")

    def __init__(self, options):
        self.options = options


@pytest.fixture
def fresh_options():
    options = Options(Logger())
    options.add_default_declarations()
    return options


class TestBindOption:
    """Test reading options through bound attributes."""

    def test_fetches_option(self, fresh_options):
        """Should read the current option value."""
        container = Container(fresh_options)
        assert container.emit is False

    def test_updates_as_values_change(self, fresh_options):
        """Should reflect set_value calls made before freezing."""
        container = Container(fresh_options)
        assert container.emit is False

        fresh_options.set_value("emit", True)
        assert container.emit is True
        assert "emit" not in vars(container)

    def test_caches_when_frozen(self, fresh_options):
        """Should replace itself with a stored value after freeze."""
        container = Container(fresh_options)

        fresh_options.set_value("emit", True)
        fresh_options.freeze()
        assert container.emit is True

        assert vars(container)["emit"] is True
        assert isinstance(Container.__dict__["emit"], BindOption)

    def test_cached_value_ignores_store(self, fresh_options):
        """Should no longer consult the store once cached."""
        container = Container(fresh_options)
        fresh_options.freeze()
        assert container.emit is False

        with pytest.raises(FrozenError):
            fresh_options.set_value("emit", True)
        container.options = None
        assert container.emit is False

    def test_scenario(self, fresh_options):
        """Should go live, then fixed, across the freeze."""
        container = Container(fresh_options)
        assert container.emit is False
        fresh_options.set_value("emit", True)
        assert container.emit is True
        fresh_options.freeze()
        assert container.emit is True
        assert vars(container)["emit"] is True

    def test_caching_is_per_instance(self, fresh_options):
        """Should cache each instance separately."""
        first = Container(fresh_options)
        second = Container(fresh_options)
        fresh_options.freeze()

        assert first.emit is False
        assert "emit" in vars(first)
        assert "emit" not in vars(second)

    def test_instances_with_different_stores(self):
        a = Options(Logger())
        a.add_default_declarations()
        b = Options(Logger())
        b.add_default_declarations()
        b.set_value("emit", True)

        assert Container(a).emit is False
        assert Container(b).emit is True

    def test_class_access_returns_descriptor(self):
        assert isinstance(Container.emit, BindOption)
        assert Container.emit.property_name == "emit"
        assert Container.emit.option_name == "emit"

    def test_unknown_option_raises(self, fresh_options):
        class Broken:
            missing = BindOption("does-not-exist")

            def __init__(self, options):
                self.options = options

        from optionstore import UnknownOptionError

        with pytest.raises(UnknownOptionError):
            Broken(fresh_options).missing


class TestPropertyName:
    """Test which attribute the cached value is stored under."""

    def test_class_attribute_name_wins(self, fresh_options):
        """Should cache under the class attribute even if another name was given."""

        class Renamed:
            emit = BindOption("emit", "other")

            def __init__(self, options):
                self.options = options

        renamed = Renamed(fresh_options)
        fresh_options.freeze()
        assert renamed.emit is False

        assert Renamed.__dict__["emit"].property_name == "emit"
        assert vars(renamed) == {"options": fresh_options, "emit": False}

    def test_cached_value_survives_store_loss(self, fresh_options):
        class Renamed:
            emit = BindOption("emit", "other")

            def __init__(self, options):
                self.options = options

        renamed = Renamed(fresh_options)
        fresh_options.freeze()
        assert renamed.emit is False
        renamed.options = None
        assert renamed.emit is False

    def test_frozen_binding_cannot_diverge(self, fresh_options):
        """Should give every instance the same value once frozen."""
        fresh_options.set_value("emit", True)
        fresh_options.freeze()
        before = Container(fresh_options)
        assert before.emit is True

        with pytest.raises(FrozenError):
            fresh_options.remove_declaration_by_name("emit")
        assert Container(fresh_options).emit is True


class TestOptionLookup:
    """Test how the owner's store is found."""

    def test_application_fallback(self, fresh_options):
        """Should use owner.application.options when owner.options is absent."""

        class Application:
            def __init__(self, options):
                self.options = options

        class Plugin:
            exclude_private = BindOption("excludePrivate")

            def __init__(self, application):
                self.application = application

        fresh_options.set_value("excludePrivate", True)
        plugin = Plugin(Application(fresh_options))
        assert plugin.exclude_private is True

    def test_missing_store(self):
        class Orphan:
            emit = BindOption("emit")

        with pytest.raises(AttributeError):
            Orphan().emit


class TestBindOptionFunction:
    """Test installing accessors on an existing class."""

    def test_bind_option(self, fresh_options):
        class Renderer:
            def __init__(self, options):
                self.options = options

        accessor = bind_option(Renderer, "theme_name", "theme")
        renderer = Renderer(fresh_options)

        assert Renderer.theme_name is accessor
        assert renderer.theme_name == "default"
        fresh_options.set_value("theme", "minimal")
        assert renderer.theme_name == "minimal"
        fresh_options.freeze()
        assert renderer.theme_name == "minimal"
        assert vars(renderer)["theme_name"] == "minimal"
