"""
Option binding for consumer objects.

Lets a class expose an option as a plain attribute:

    class Renderer:
        emit = BindOption("emit")

        def __init__(self, options):
            self.options = options

Reads go through Options.get_value until the store is frozen. The first
read after freeze stores the value in the instance ``__dict__``. BindOption
is a non-data descriptor, so from then on that instance attribute shadows
it and reads never touch the store again. Caching is per instance and
per attribute.
"""

from typing import Any, Optional

from .options import Options


def _options_of(owner: Any) -> Options:
    options = getattr(owner, "options", None)
    if options is None:
        application = getattr(owner, "application", None)
        options = getattr(application, "options", None)
    if options is None:
        raise AttributeError(
            f"{type(owner).__name__} has no 'options' or 'application.options' to bind against"
        )
    return options


class BindOption:
    """
    Memoizing accessor for one option.

    Args:
        option_name: Declared option to read
        property_name: Attribute name; replaced by the class attribute name when declared in a class body
    """

    def __init__(self, option_name: str, property_name: Optional[str] = None):
        self.option_name = option_name
        self.property_name = property_name

    def __set_name__(self, owner: type, name: str) -> None:
        # The cached value must land under the attribute that shadows us
        self.property_name = name

    def __get__(self, instance: Any, owner: Optional[type] = None) -> Any:
        if instance is None:
            return self

        options = _options_of(instance)
        value = options.get_value(self.option_name)

        if options.is_frozen():
            instance.__dict__[self.property_name] = value

        return value

    def __repr__(self) -> str:
        return f"BindOption({self.option_name!r})"


def bind_option(owner_cls: type, property_name: str, option_name: str) -> BindOption:
    """
    Install a BindOption on an existing class.

    Args:
        owner_cls: Class whose instances expose the option
        property_name: Attribute name on owner_cls
        option_name: Declared option to read

    Returns:
        The installed accessor
    """
    accessor = BindOption(option_name, property_name)
    setattr(owner_cls, property_name, accessor)
    return accessor


__all__ = ["BindOption", "bind_option"]
