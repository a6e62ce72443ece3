"""
Validated user edits of cycle settings.
"""

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, Any, Optional

from marshmallow import ValidationError

from cycle_tracker.models.tracker_state import CycleTrackerState
from cycle_tracker.schemas.settings_schemas import SettingsUpdateSchema

logger = logging.getLogger(__name__)


class SettingsService:
    @staticmethod
    def validate_settings_update(edits: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate edits, returning the cleaned values.
        Raises ValidationError with user-facing messages keyed by field.
        """
        return SettingsUpdateSchema().load(edits)

    @staticmethod
    def update_settings(state: CycleTrackerState,
                        edits: Dict[str, Any],
                        now: Optional[datetime] = None) -> CycleTrackerState:
        try:
            cleaned = SettingsService.validate_settings_update(edits)
        except ValidationError as e:
            logger.info("Rejected settings edit: %s", e.messages)
            raise

        settings = replace(
            state.settings,
            **cleaned,
            last_updated=(now or datetime.now(timezone.utc)).isoformat()
        )
        return replace(state, settings=settings)

    @staticmethod
    def get_error_message(error: ValidationError) -> str:
        """Flatten validation messages into a single line for display."""
        messages = error.messages
        if isinstance(messages, dict):
            known_fields = SettingsUpdateSchema().fields
            parts = []
            for field_name, field_messages in messages.items():
                if isinstance(field_messages, list):
                    # Range errors already name the setting
                    prefix = '' if field_name in known_fields else f"{field_name}: "
                    parts.extend(f"{prefix}{m}" for m in field_messages)
                else:
                    parts.append(f"{field_name}: {field_messages}")
            return '; '.join(parts)
        return '; '.join(str(m) for m in messages)
