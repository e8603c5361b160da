"""Current and legacy product names for Tessa.

The product has been renamed twice (clawdbot -> moltbot -> tessa). Installs
from any generation must keep working, so every name-derived artifact (env
var prefix, state directory, config filename, plugin manifest) is modelled
as a ``Namespace`` and looked up in a fixed order: current first, then the
legacy names.
"""

from pydantic import BaseModel, ConfigDict


class Namespace(BaseModel):
    """A product name and the artifacts derived from it."""

    model_config = ConfigDict(frozen=True)

    name: str

    @property
    def env_prefix(self) -> str:
        """Prefix for environment variables, e.g. ``TESSA``."""
        return self.name.upper()

    @property
    def state_dirname(self) -> str:
        """Hidden state directory name under the home directory."""
        return f".{self.name}"

    @property
    def config_filename(self) -> str:
        return f"{self.name}.json"

    @property
    def plugin_manifest_filename(self) -> str:
        return f"{self.name}.plugin.json"

    def env_var(self, suffix: str) -> str:
        """Return the environment variable name for ``suffix`` in this namespace."""
        return f"{self.env_prefix}_{suffix}"


CURRENT = Namespace(name="tessa")
LEGACY_1 = Namespace(name="moltbot")
LEGACY_2 = Namespace(name="clawdbot")
# Spelling variant that shipped briefly; only probed during migration scans.
HISTORICAL = Namespace(name="moldbot")

# Env-var namespaces and CLI names, highest precedence first
NAMESPACES: tuple[Namespace, ...] = (CURRENT, LEGACY_1, LEGACY_2)

# Config filename probe order under any state directory
CONFIG_FILENAME_NAMESPACES: tuple[Namespace, ...] = (CURRENT, LEGACY_1, LEGACY_2, HISTORICAL)

PROJECT_NAME = CURRENT.name
LEGACY_PROJECT_NAME_1 = LEGACY_1.name
LEGACY_PROJECT_NAME_2 = LEGACY_2.name
LEGACY_PROJECT_NAME = LEGACY_PROJECT_NAME_2
LEGACY_PROJECT_NAMES = (LEGACY_PROJECT_NAME_1, LEGACY_PROJECT_NAME_2)

MANIFEST_KEY = PROJECT_NAME
LEGACY_MANIFEST_KEYS = LEGACY_PROJECT_NAMES
LEGACY_MANIFEST_KEY = LEGACY_PROJECT_NAME_2

PLUGIN_MANIFEST_FILENAME = CURRENT.plugin_manifest_filename
LEGACY_PLUGIN_MANIFEST_FILENAME_1 = LEGACY_1.plugin_manifest_filename
LEGACY_PLUGIN_MANIFEST_FILENAME_2 = LEGACY_2.plugin_manifest_filename
LEGACY_PLUGIN_MANIFEST_FILENAME = LEGACY_PLUGIN_MANIFEST_FILENAME_2
LEGACY_PLUGIN_MANIFEST_FILENAMES = (
    LEGACY_PLUGIN_MANIFEST_FILENAME_1,
    LEGACY_PLUGIN_MANIFEST_FILENAME_2,
)

LEGACY_CANVAS_HANDLER_NAME = f"{LEGACY_PROJECT_NAME_2}CanvasA2UIAction"
LEGACY_CANVAS_HANDLER_NAMES = (LEGACY_CANVAS_HANDLER_NAME,)

MACOS_APP_SOURCES_DIR = "apps/macos/Sources/Tessa"
LEGACY_MACOS_APP_SOURCES_DIR = "apps/macos/Sources/Clawdbot"
LEGACY_MACOS_APP_SOURCES_DIR_1 = "apps/macos/Sources/Moltbot"
LEGACY_MACOS_APP_SOURCES_DIRS = (
    LEGACY_MACOS_APP_SOURCES_DIR,
    LEGACY_MACOS_APP_SOURCES_DIR_1,
)
