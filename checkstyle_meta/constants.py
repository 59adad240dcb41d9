class Defaults:
    RESOURCES_DIR = "src/main/resources"
    CONFIG_FILE = "checkstyle_meta.toml"
    FAIL_FAST = False


class Namespaces:
    CHECKSTYLE_ROOT = "com.puppycrawl.tools.checkstyle"
    CHECKSTYLE_TOKEN = "checkstyle"


class Separators:
    POSIX = "/"
    # Substitution template: the escaped slash expands to a plain "/".
    WINDOWS = "\\/"


class MetaPaths:
    META_DIR = "meta"
    EXTERNAL_PREFIX = "checkstylemeta-"
    CHECK_SUFFIX = "Check"
    XML_SUFFIX = ".xml"


class XmlFormat:
    INDENT = "    "
    ENCODING = "UTF-8"


class EnvVars:
    RESOURCES_DIR = "CHECKSTYLE_META_RESOURCES_DIR"
    OS_NAME = "CHECKSTYLE_META_OS_NAME"
    FAIL_FAST = "CHECKSTYLE_META_FAIL_FAST"
