"""
Stock option declarations for a documentation generator.

Builds the option set registered by Options.add_default_declarations:
input selection, output, theming, source links and logging.
"""
from typing import List

from .declarations import (
    ArrayDeclarationOption,
    BooleanDeclarationOption,
    DeclarationOption,
    MapDeclarationOption,
    MixedDeclarationOption,
    ParameterHint,
    PathDeclarationOption,
    StringDeclarationOption,
)


LOG_LEVELS = {"Verbose": 0, "Info": 1, "Warn": 2, "Error": 3, "None": 4}


def default_declarations() -> List[DeclarationOption]:
    declarations: List[DeclarationOption] = []

    # Configuration files
    declarations += [
        PathDeclarationOption(
            name="options",
            help="Specify a json option file that should be loaded.",
            hint=ParameterHint.FILE,
            default_value="typedoc.json",
        ),
        PathDeclarationOption(
            name="tsconfig",
            help="Specify a compiler configuration file that should be loaded.",
            hint=ParameterHint.FILE,
            default_value="tsconfig.json",
        ),
    ]

    # Input
    declarations += [
        ArrayDeclarationOption(
            name="entryPoints",
            help="The entry points of your documentation.",
        ),
        ArrayDeclarationOption(
            name="exclude",
            help="Define patterns to be excluded when expanding a directory that was specified as an entry point.",
        ),
        ArrayDeclarationOption(
            name="externalPattern",
            help="Define patterns for files that should be considered being external.",
            default_value=["**/node_modules/**"],
        ),
        BooleanDeclarationOption(
            name="excludeExternals",
            help="Prevent externally resolved symbols from being documented.",
        ),
        BooleanDeclarationOption(
            name="excludeNotDocumented",
            help="Prevent symbols that are not explicitly documented from appearing in the results.",
        ),
        BooleanDeclarationOption(
            name="excludePrivate",
            help="Ignores private variables and methods.",
        ),
        BooleanDeclarationOption(
            name="excludeProtected",
            help="Ignores protected variables and methods.",
        ),
        BooleanDeclarationOption(
            name="disableSources",
            help="Disables setting the source of a reflection when documenting it.",
        ),
        PathDeclarationOption(
            name="includes",
            help="Specifies the location to look for included documents.",
            hint=ParameterHint.DIRECTORY,
        ),
        PathDeclarationOption(
            name="media",
            help="Specifies the location with media files that should be copied to the output directory.",
            hint=ParameterHint.DIRECTORY,
        ),
    ]

    # Output
    declarations += [
        BooleanDeclarationOption(
            name="emit",
            help="If set, the compiler output is emitted alongside the documentation.",
        ),
        PathDeclarationOption(
            name="out",
            help="Specifies the location the documentation should be written to.",
            hint=ParameterHint.DIRECTORY,
        ),
        PathDeclarationOption(
            name="json",
            help="Specifies the location and filename a JSON file describing the project is written to.",
            hint=ParameterHint.FILE,
        ),
        StringDeclarationOption(
            name="theme",
            help="Specify the path to the theme that should be used, or 'default' for the built-in theme.",
            default_value="default",
        ),
        StringDeclarationOption(
            name="name",
            help="Set the name of the project that will be used in the header of the template.",
        ),
        PathDeclarationOption(
            name="readme",
            help="Path to the readme file that should be displayed on the index page.",
            hint=ParameterHint.FILE,
        ),
        ArrayDeclarationOption(
            name="toc",
            help="Define the contents of the top level table of contents as a list of names.",
        ),
        StringDeclarationOption(
            name="defaultCategory",
            help="Specifies the default category for reflections without a category.",
            default_value="Other",
        ),
        ArrayDeclarationOption(
            name="categoryOrder",
            help="Specifies the order in which categories appear. * indicates the relative order for categories not in the list.",
        ),
        BooleanDeclarationOption(
            name="categorizeByGroup",
            help="Specifies whether categorization will be done at the group level.",
            default_value=True,
        ),
        BooleanDeclarationOption(
            name="hideGenerator",
            help="Do not print the generator link at the end of the page.",
        ),
    ]

    # Source links
    declarations += [
        StringDeclarationOption(
            name="gitRevision",
            help="Use specified revision instead of the last revision for linking to source files.",
        ),
        StringDeclarationOption(
            name="gitRemote",
            help="Use the specified remote for linking to source files.",
            default_value="origin",
        ),
    ]

    # Process
    declarations += [
        BooleanDeclarationOption(
            name="help",
            help="Print this message.",
        ),
        BooleanDeclarationOption(
            name="version",
            help="Print the current version.",
        ),
        BooleanDeclarationOption(
            name="showConfig",
            help="Print the resolved configuration and exit.",
        ),
        ArrayDeclarationOption(
            name="plugin",
            help="Specify the plugins that should be loaded. Omit to load all installed plugins, set to 'none' to load no plugins.",
        ),
        MixedDeclarationOption(
            name="logger",
            help="Specify the logger that should be used, 'none' or 'console'.",
            default_value="console",
        ),
        MapDeclarationOption(
            name="logLevel",
            help="Specify what level of logging should be used.",
            map=dict(LOG_LEVELS),
            default_value=LOG_LEVELS["Info"],
        ),
        BooleanDeclarationOption(
            name="listInvalidSymbolLinks",
            help="Emits a list of broken symbol links after documentation generation.",
        ),
        BooleanDeclarationOption(
            name="treatWarningsAsErrors",
            help="If set, warnings will be treated as errors.",
        ),
    ]

    return declarations


__all__ = ["LOG_LEVELS", "default_declarations"]
