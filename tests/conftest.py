import pytest

from optionstore import Logger, MapDeclarationOption, Options


@pytest.fixture
def logger():
    return Logger()


@pytest.fixture
def options(logger):
    """Options with the stock declarations plus a small map option."""
    opts = Options(logger)
    opts.add_default_declarations()
    opts.add_declaration(
        MapDeclarationOption(name="mapped", map={"a": 1}, default_value=2)
    )
    return opts
