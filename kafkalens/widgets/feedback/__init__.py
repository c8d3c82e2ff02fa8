"""Feedback widgets for notifications."""

from kafkalens.widgets.feedback.notification_panel import NotificationPanel

__all__ = [
    "NotificationPanel",
]
