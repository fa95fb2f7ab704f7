from __future__ import annotations

from collections.abc import Sequence

from pipeline_triggers.model.trigger import Notification


def merge_notifications(
    pipeline_notifications: Sequence[Notification] | None,
    trigger_notifications: Sequence[Notification] | None,
) -> list[Notification]:
    """Pipeline notifications followed by trigger notifications.

    Missing lists count as empty. Nothing is deduplicated.
    """

    notifications: list[Notification] = []
    if pipeline_notifications is not None:
        notifications.extend(pipeline_notifications)
    if trigger_notifications is not None:
        notifications.extend(trigger_notifications)
    return notifications
