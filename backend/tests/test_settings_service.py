from datetime import datetime, timezone

import pytest
from marshmallow import ValidationError

from cycle_tracker.services.settings_service import SettingsService

NOW = datetime(2024, 2, 1, 9, 30, tzinfo=timezone.utc)


class TestSettingsValidation:
    @pytest.mark.parametrize('edits', [
        {'average_cycle_length': 21},
        {'average_cycle_length': 35},
        {'average_period_length': 1},
        {'average_period_length': 10},
        {'notification_days': 1},
        {'notification_days': 7},
        {'quiet_notifications': False},
    ])
    def test_accepts_values_in_range(self, edits) -> None:
        assert SettingsService.validate_settings_update(edits) == edits

    @pytest.mark.parametrize('edits,field_name', [
        ({'average_cycle_length': 20}, 'average_cycle_length'),
        ({'average_cycle_length': 40}, 'average_cycle_length'),
        ({'average_period_length': 0}, 'average_period_length'),
        ({'average_period_length': 11}, 'average_period_length'),
        ({'notification_days': 0}, 'notification_days'),
        ({'notification_days': 8}, 'notification_days'),
        ({'average_cycle_length': 'abc'}, 'average_cycle_length'),
    ])
    def test_rejects_values_out_of_range(self, edits, field_name) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SettingsService.validate_settings_update(edits)
        assert field_name in exc_info.value.messages

    @pytest.mark.parametrize('value', [35.9, 30.0, '30'])
    def test_rejects_non_integer_lengths(self, value) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SettingsService.validate_settings_update({'average_cycle_length': value})
        assert 'average_cycle_length' in exc_info.value.messages

    def test_fractional_edit_does_not_truncate(self, single_cycle_state) -> None:
        with pytest.raises(ValidationError):
            SettingsService.update_settings(single_cycle_state, {'average_period_length': 4.5})
        assert single_cycle_state.settings.average_period_length == 3

    def test_rejects_unknown_fields(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SettingsService.validate_settings_update({'ovulation_length': 10})
        assert 'ovulation_length' in exc_info.value.messages


class TestUpdateSettings:
    def test_rejected_edit_leaves_settings_unchanged(self, single_cycle_state) -> None:
        before = single_cycle_state.settings

        with pytest.raises(ValidationError) as exc_info:
            SettingsService.update_settings(single_cycle_state, {'average_cycle_length': 40})

        assert single_cycle_state.settings == before
        assert SettingsService.get_error_message(exc_info.value) == \
            'Cycle length should be between 21 and 35 days'

    def test_partially_invalid_edit_is_rejected_whole(self, single_cycle_state) -> None:
        with pytest.raises(ValidationError):
            SettingsService.update_settings(
                single_cycle_state,
                {'average_cycle_length': 30, 'notification_days': 9}
            )
        assert single_cycle_state.settings.average_cycle_length == 28

    def test_accepted_edit(self, single_cycle_state) -> None:
        state = SettingsService.update_settings(
            single_cycle_state,
            {'average_cycle_length': 30, 'notification_days': 3, 'quiet_notifications': False},
            now=NOW
        )

        assert state.settings.average_cycle_length == 30
        assert state.settings.notification_days == 3
        assert state.settings.quiet_notifications is False
        assert state.settings.average_period_length == 3
        assert state.settings.last_updated == NOW.isoformat()
        assert state.cycles == single_cycle_state.cycles

    def test_error_message_names_unknown_fields(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            SettingsService.validate_settings_update({'colour': 'green'})
        assert SettingsService.get_error_message(exc_info.value) == 'colour: Unknown field.'
