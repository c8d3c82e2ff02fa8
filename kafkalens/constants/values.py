"""Scalar constants for the console.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "KafkaLens"
CLI_NAME: Final = "kafkalens"

# ============================================================================
# Kafka client
# ============================================================================

# Group id used only by the short-lived metadata consumers. No offsets are
# ever committed under it.
INSPECT_GROUP_ID: Final = "kafkalens-inspect"
CLIENT_ID: Final = "kafkalens"
IAM_SECURITY_PROTOCOL: Final = "SASL_SSL"
IAM_SASL_MECHANISM: Final = "OAUTHBEARER"

# ============================================================================
# Table conventions
# ============================================================================

# Topics whose name starts with this prefix are internal and rendered muted.
INTERNAL_TOPIC_PREFIX: Final = "_"
SELECTED_MARKER: Final = "●"
UNSELECTED_MARKER: Final = " "

# ============================================================================
# Notification messages
# ============================================================================

MSG_TOPICS_DELETED: Final = "Topics deleted successfully"
MSG_GROUPS_DELETED: Final = "Consumer groups deleted successfully"
MSG_NO_TOPICS_SELECTED: Final = "No topics selected"
MSG_NO_GROUPS_MATCHED: Final = "No consumer groups to delete"
MSG_UNKNOWN_COMMAND: Final = "Unknown command '{text}'"

__all__ = [
    "APP_TITLE",
    "CLIENT_ID",
    "CLI_NAME",
    "IAM_SASL_MECHANISM",
    "IAM_SECURITY_PROTOCOL",
    "INSPECT_GROUP_ID",
    "INTERNAL_TOPIC_PREFIX",
    "MSG_GROUPS_DELETED",
    "MSG_NO_GROUPS_MATCHED",
    "MSG_NO_TOPICS_SELECTED",
    "MSG_TOPICS_DELETED",
    "MSG_UNKNOWN_COMMAND",
    "SELECTED_MARKER",
    "UNSELECTED_MARKER",
]
