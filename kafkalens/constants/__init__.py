"""Constants module for KafkaLens.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings with Final)
- timeouts.py: Timeout values
- limits.py: Limit values
- defaults.py: Default values for settings

Note: Keyboard bindings are defined in kafkalens.keyboard module.
"""

from kafkalens.constants.defaults import (
    AWS_REGION_DEFAULT,
    CONFIG_PATH_DEFAULT,
    IAM_AUTH_DEFAULT,
    LOG_LEVEL_DEFAULT,
    TIMEOUT_MS_DEFAULT,
)
from kafkalens.constants.enums import (
    ColumnSizing,
    InputMode,
    NotificationKind,
)
from kafkalens.constants.limits import (
    COLUMN_PADDING,
    MAX_HISTORY_DISPLAY,
)
from kafkalens.constants.timeouts import (
    AUTH_TOKEN_TIMEOUT,
    CLUSTER_REQUEST_TIMEOUT_MS,
)
from kafkalens.constants.values import (
    APP_TITLE,
    CLI_NAME,
    INTERNAL_TOPIC_PREFIX,
)

__all__ = [
    # Application
    "APP_TITLE",
    # Timeouts
    "AUTH_TOKEN_TIMEOUT",
    # Defaults
    "AWS_REGION_DEFAULT",
    "CLI_NAME",
    "CLUSTER_REQUEST_TIMEOUT_MS",
    # Limits
    "COLUMN_PADDING",
    "CONFIG_PATH_DEFAULT",
    "IAM_AUTH_DEFAULT",
    "INTERNAL_TOPIC_PREFIX",
    "LOG_LEVEL_DEFAULT",
    "MAX_HISTORY_DISPLAY",
    "TIMEOUT_MS_DEFAULT",
    # Enums
    "ColumnSizing",
    "InputMode",
    "NotificationKind",
]
