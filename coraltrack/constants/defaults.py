"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

# ============================================================================
# Paths
# ============================================================================

CONFIG_PATH_ENV: Final = "CORALTRACK_CONFIG"
CONFIG_PATH_DEFAULT: Final = "~/.config/coraltrack/settings.yaml"
STATE_PATH_DEFAULT: Final = "~/.config/coraltrack/state.yaml"

# ============================================================================
# UI defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "WARNING"
SIDEBAR_OPEN_DEFAULT: Final = True

__all__ = [
    "CONFIG_PATH_DEFAULT",
    "CONFIG_PATH_ENV",
    "LOG_LEVEL_DEFAULT",
    "SIDEBAR_OPEN_DEFAULT",
    "STATE_PATH_DEFAULT",
]
