"""Output location of metadata files.

Modules inside the Checkstyle namespace are written beside their package
under a ``meta`` directory::

    com.puppycrawl.tools.checkstyle.checks.FooCheck
        -> <root>/com/puppycrawl/tools/checkstyle/meta/checks/FooCheck.xml

Any other module lands flat in the resources root as
``checkstylemeta-<name>.xml`` (``<name>Check`` for checks).
"""

from __future__ import annotations

from pathlib import Path
import platform
import re

from checkstyle_meta.constants import Defaults, MetaPaths, Namespaces, Separators
from checkstyle_meta.domain.entities import ModuleType

FILEPATH_CONVERSION = re.compile(r"\.")
TEMPLATE_ESCAPE = re.compile(r"\\(.)")


def is_windows(os_name: str) -> bool:
    return os_name.strip().lower().startswith("win")


def platform_separator(os_name: str | None = None) -> str:
    """Return the separator token used to turn package dots into directories."""
    if os_name is None:
        os_name = platform.system()
    return Separators.WINDOWS if is_windows(os_name) else Separators.POSIX


def default_resources_root() -> Path:
    return Path.cwd() / Defaults.RESOURCES_DIR


def resolve_output_path(
    fully_qualified_name: str,
    module_type: ModuleType,
    name: str,
    *,
    resources_root: Path | None = None,
    separator: str | None = None,
) -> Path:
    """Compute where the metadata file of a module is written.

    Args:
        fully_qualified_name: Dotted name of the module class
        module_type: Category of the module
        name: Simple module name, used for modules outside Checkstyle
        resources_root: Base directory (default: ``src/main/resources``
            under the current working directory, read at call time)
        separator: Separator token (default: chosen from the platform)

    Returns:
        Path of the ``.xml`` file

    A name that starts with the Checkstyle namespace must contain the token
    ``checkstyle``; this is guaranteed by the prefix itself.
    """
    if resources_root is None:
        resources_root = default_resources_root()
    if separator is None:
        separator = platform_separator()
    root = str(resources_root).rstrip("/\\")

    if fully_qualified_name.startswith(Namespaces.CHECKSTYLE_ROOT):
        prefix, remainder = split_module_path(fully_qualified_name, separator)
        return Path(
            f"{root}/{prefix}/{MetaPaths.META_DIR}/{remainder}{MetaPaths.XML_SUFFIX}"
        )

    return Path(f"{root}/{external_file_name(module_type, name)}")


def split_module_path(fully_qualified_name: str, separator: str) -> tuple[str, str]:
    """Split a Checkstyle module name into package root and relative path.

    The first part ends with ``checkstyle``; the separator following it is
    dropped from the second part. The separator token is a substitution
    template: a backslash escapes the character after it, so the Windows
    token ``\\/`` inserts a plain ``/``.
    """
    replacement = expand_separator(separator)
    module_file_path = FILEPATH_CONVERSION.sub(
        lambda _match: replacement, fully_qualified_name
    )
    token = Namespaces.CHECKSTYLE_TOKEN
    split_at = module_file_path.index(token) + len(token)
    return module_file_path[:split_at], module_file_path[split_at + len(replacement) :]


def external_file_name(module_type: ModuleType, name: str) -> str:
    module_name = name
    if module_type is ModuleType.CHECK:
        module_name += MetaPaths.CHECK_SUFFIX
    return f"{MetaPaths.EXTERNAL_PREFIX}{module_name}{MetaPaths.XML_SUFFIX}"


def expand_separator(separator: str) -> str:
    """Resolve backslash escapes in a separator token."""
    return TEMPLATE_ESCAPE.sub(r"\1", separator)
