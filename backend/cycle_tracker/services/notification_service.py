"""
Reminder planning for upcoming periods and ovulation.

Planning is pure: it decides which reminders should exist for a state.
Applying a plan is an explicit command against a scheduler collaborator
(the platform's local notification API), issued by the caller.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, time
from typing import Any, Dict, List, Optional, Protocol

from cycle_tracker.models.tracker_state import CycleTrackerState
from cycle_tracker.services.cycle_engine import CycleEngine

logger = logging.getLogger(__name__)

PERIOD_REMINDER = 'period'
OVULATION_REMINDER = 'ovulation'


@dataclass(frozen=True)
class Reminder:
    kind: str
    when: datetime  # naive local time
    title: str
    message: str
    silent: bool
    vibrate: bool
    sound_name: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        return {
            'kind': self.kind,
            'title': self.title,
            'message': self.message,
            'allow_while_idle': True,
            'silent': self.silent,
            'vibrate': self.vibrate,
            'sound_name': self.sound_name
        }


class ReminderScheduler(Protocol):
    def schedule(self, when: datetime, payload: Dict[str, Any]) -> None:
        ...

    def cancel_all(self) -> None:
        ...


class NotificationService:
    @staticmethod
    def _period_message(notification_days: int) -> str:
        plural = 's' if notification_days > 1 else ''
        return f"Your period is expected to start in {notification_days} day{plural}."

    @staticmethod
    def _build_reminder(kind: str, when: datetime, title: str, message: str, quiet: bool) -> Reminder:
        return Reminder(
            kind=kind,
            when=when,
            title=title,
            message=message,
            silent=quiet,
            vibrate=not quiet,
            sound_name=None if quiet else 'default'
        )

    @staticmethod
    def plan_reminders(state: CycleTrackerState, now: Optional[datetime] = None) -> List[Reminder]:
        """
        Reminders that should be pending for this state. Only reminders in the
        future relative to now are returned; an empty history yields none.
        """
        now = now or datetime.now()
        if now.tzinfo is not None:
            now = now.astimezone().replace(tzinfo=None)

        forecast = CycleEngine.build_forecast(state)
        if not forecast:
            return []

        settings = state.settings
        candidates = [
            NotificationService._build_reminder(
                PERIOD_REMINDER,
                datetime.combine(forecast.notification_date, time.min),
                "Period Reminder",
                NotificationService._period_message(settings.notification_days),
                settings.quiet_notifications
            ),
            NotificationService._build_reminder(
                OVULATION_REMINDER,
                datetime.combine(forecast.next_ovulation_date, time.min),
                "Ovulation Reminder",
                "You're approaching your most fertile days!",
                settings.quiet_notifications
            )
        ]

        return [reminder for reminder in candidates if reminder.when > now]

    @staticmethod
    def apply(scheduler: ReminderScheduler, reminders: List[Reminder]) -> int:
        """Replace every pending reminder with the given plan."""
        scheduler.cancel_all()
        for reminder in reminders:
            scheduler.schedule(reminder.when, reminder.to_payload())
        logger.debug("Scheduled %d reminder(s)", len(reminders))
        return len(reminders)

    @staticmethod
    def cancel_all(scheduler: ReminderScheduler) -> None:
        scheduler.cancel_all()
