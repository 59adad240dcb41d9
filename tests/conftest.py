from pathlib import Path

import pytest

from checkstyle_meta.constants import EnvVars
from checkstyle_meta.domain.entities import (
    ModuleDetails,
    ModulePropertyDetails,
    ModuleType,
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment settings out of the tests."""
    for name in (EnvVars.RESOURCES_DIR, EnvVars.OS_NAME, EnvVars.FAIL_FAST):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def check_details() -> ModuleDetails:
    """A check inside the Checkstyle namespace with properties and keys."""
    return ModuleDetails(
        name="MethodLength",
        module_type=ModuleType.CHECK,
        fully_qualified_name=(
            "com.puppycrawl.tools.checkstyle.checks.sizes.MethodLengthCheck"
        ),
        parent="com.puppycrawl.tools.checkstyle.TreeWalker",
        description="Checks for long methods & <b>constructors</b>.",
        properties=(
            ModulePropertyDetails(
                name="max",
                type="int",
                default_value="150",
                description="Specify the maximum number of lines allowed.",
            ),
            ModulePropertyDetails(
                name="countEmpty",
                type="boolean",
                default_value="true",
                validation_type="tokenSet",
                description="Control whether to count empty lines.",
            ),
        ),
        violation_message_keys=frozenset({"maxLen.method", "maxLen.constructor"}),
    )


@pytest.fixture
def external_filter() -> ModuleDetails:
    """A filter outside the Checkstyle namespace without properties or keys."""
    return ModuleDetails(
        name="MyFilter",
        module_type=ModuleType.FILTER,
        fully_qualified_name="org.example.MyFilter",
        parent="com.puppycrawl.tools.checkstyle.Checker",
        description="Suppresses everything.",
    )


@pytest.fixture
def resources_root(tmp_path: Path) -> Path:
    return tmp_path / "resources"
