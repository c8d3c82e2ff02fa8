"""Default values for settings.

All default values used in ConnectionSettings and the command line.
"""

from pathlib import Path
from typing import Final

from kafkalens.constants.timeouts import CLUSTER_REQUEST_TIMEOUT_MS

# ============================================================================
# Connection defaults
# ============================================================================

AWS_REGION_DEFAULT: Final = "eu-west-1"
IAM_AUTH_DEFAULT: Final = False
TIMEOUT_MS_DEFAULT: Final = CLUSTER_REQUEST_TIMEOUT_MS

# ============================================================================
# Runtime defaults
# ============================================================================

LOG_LEVEL_DEFAULT: Final = "INFO"
CONFIG_PATH_DEFAULT: Final = Path("~/.config/kafkalens/config.yaml")

__all__ = [
    "AWS_REGION_DEFAULT",
    "CONFIG_PATH_DEFAULT",
    "IAM_AUTH_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "TIMEOUT_MS_DEFAULT",
]
