from datetime import date, datetime, timezone

from cycle_tracker.models import CycleSettings, CycleTrackerState
from cycle_tracker.services.notification_service import (
    NotificationService,
    PERIOD_REMINDER,
    OVULATION_REMINDER
)
from tests.conftest import make_cycle


class FakeScheduler:
    def __init__(self):
        self.calls = []

    def schedule(self, when, payload):
        self.calls.append(('schedule', when, payload))

    def cancel_all(self):
        self.calls.append(('cancel_all',))


class TestPlanReminders:
    def test_plans_period_and_ovulation_reminders(self, single_cycle_state) -> None:
        reminders = NotificationService.plan_reminders(single_cycle_state, now=datetime(2024, 1, 10, 8, 0))

        assert [r.kind for r in reminders] == [PERIOD_REMINDER, OVULATION_REMINDER]
        period, ovulation = reminders
        assert period.when == datetime(2024, 1, 27, 0, 0)
        assert period.title == 'Period Reminder'
        assert period.message == 'Your period is expected to start in 2 days.'
        assert ovulation.when == datetime(2024, 1, 15, 0, 0)
        assert ovulation.title == 'Ovulation Reminder'

    def test_skips_reminders_in_the_past(self, single_cycle_state) -> None:
        reminders = NotificationService.plan_reminders(single_cycle_state, now=datetime(2024, 1, 20))
        assert [r.kind for r in reminders] == [PERIOD_REMINDER]

        assert NotificationService.plan_reminders(single_cycle_state, now=datetime(2024, 2, 1)) == []

    def test_reminder_at_now_is_not_planned(self, single_cycle_state) -> None:
        reminders = NotificationService.plan_reminders(single_cycle_state, now=datetime(2024, 1, 27, 0, 0))
        assert reminders == []

    def test_accepts_aware_now(self, single_cycle_state) -> None:
        reminders = NotificationService.plan_reminders(
            single_cycle_state,
            now=datetime(2023, 12, 1, tzinfo=timezone.utc)
        )
        assert len(reminders) == 2

    def test_empty_history_plans_nothing(self, empty_state) -> None:
        assert NotificationService.plan_reminders(empty_state, now=datetime(2024, 1, 1)) == []

    def test_singular_day_message(self) -> None:
        state = CycleTrackerState(
            cycles=[make_cycle('c1', date(2024, 1, 1), date(2024, 1, 5))],
            settings=CycleSettings(notification_days=1)
        )
        period = NotificationService.plan_reminders(state, now=datetime(2024, 1, 2))[0]
        assert period.message == 'Your period is expected to start in 1 day.'
        assert period.when == datetime(2024, 1, 28, 0, 0)

    def test_quiet_mode(self, single_cycle_state) -> None:
        reminder = NotificationService.plan_reminders(single_cycle_state, now=datetime(2024, 1, 2))[0]
        assert reminder.silent is True
        assert reminder.vibrate is False
        assert reminder.sound_name is None

    def test_audible_mode(self) -> None:
        state = CycleTrackerState(
            cycles=[make_cycle('c1', date(2024, 1, 1), date(2024, 1, 5))],
            settings=CycleSettings(quiet_notifications=False)
        )
        reminder = NotificationService.plan_reminders(state, now=datetime(2024, 1, 2))[0]
        assert reminder.silent is False
        assert reminder.vibrate is True
        assert reminder.sound_name == 'default'


class TestApplyReminders:
    def test_cancels_before_scheduling(self, single_cycle_state) -> None:
        scheduler = FakeScheduler()
        reminders = NotificationService.plan_reminders(single_cycle_state, now=datetime(2024, 1, 2))

        count = NotificationService.apply(scheduler, reminders)

        assert count == 2
        assert scheduler.calls[0] == ('cancel_all',)
        assert [call[0] for call in scheduler.calls[1:]] == ['schedule', 'schedule']
        _, when, payload = scheduler.calls[1]
        assert when == datetime(2024, 1, 27, 0, 0)
        assert payload['title'] == 'Period Reminder'
        assert payload['allow_while_idle'] is True

    def test_empty_plan_only_cancels(self) -> None:
        scheduler = FakeScheduler()
        assert NotificationService.apply(scheduler, []) == 0
        assert scheduler.calls == [('cancel_all',)]

    def test_cancel_all(self) -> None:
        scheduler = FakeScheduler()
        NotificationService.cancel_all(scheduler)
        assert scheduler.calls == [('cancel_all',)]
