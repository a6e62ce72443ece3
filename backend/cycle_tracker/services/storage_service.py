"""
Local persistence of the cycle history and settings.

Both are stored as JSON blobs keyed like the mobile app's storage.
Reads fail soft to empty/default values; writes raise StorageError.
"""

from typing import Dict, List

from flask import current_app
from marshmallow import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from cycle_tracker import db
from cycle_tracker.models.period_cycle import PeriodCycle
from cycle_tracker.models.cycle_settings import CycleSettings
from cycle_tracker.models.stored_blob import StoredBlob
from cycle_tracker.models.tracker_state import CycleTrackerState
from cycle_tracker.schemas.cycle_schemas import PeriodCycleSchema, CycleSettingsSchema
from cycle_tracker.services.cycle_constants import STORAGE_KEYS


class StorageError(Exception):
    """A write to local storage failed."""


class StorageService:
    @staticmethod
    def _stage_blob(key: str, payload: str) -> None:
        blob = db.session.get(StoredBlob, key)
        if blob is None:
            db.session.add(StoredBlob(key=key, payload=payload))
        else:
            blob.payload = payload

    @staticmethod
    def _write_blobs(payloads: Dict[str, str]) -> None:
        """Write every blob in one transaction; on failure none of them change."""
        try:
            for key, payload in payloads.items():
                StorageService._stage_blob(key, payload)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            keys = ', '.join(payloads)
            current_app.logger.error("Error saving %s: %s", keys, e)
            raise StorageError(f"Failed to save {keys}") from e

    @staticmethod
    def _cycles_payload(cycles: List[PeriodCycle]) -> str:
        return PeriodCycleSchema(many=True).dumps(list(cycles))

    @staticmethod
    def _settings_payload(settings: CycleSettings) -> str:
        return CycleSettingsSchema().dumps(settings)

    @staticmethod
    def _read_blob(key: str):
        blob = db.session.get(StoredBlob, key)
        return blob.payload if blob else None

    @staticmethod
    def save_cycles(cycles: List[PeriodCycle]) -> None:
        StorageService._write_blobs({
            STORAGE_KEYS['PERIOD_CYCLES']: StorageService._cycles_payload(cycles)
        })

    @staticmethod
    def load_cycles() -> List[PeriodCycle]:
        try:
            payload = StorageService._read_blob(STORAGE_KEYS['PERIOD_CYCLES'])
            if not payload:
                return []
            return PeriodCycleSchema(many=True).loads(payload)
        except (SQLAlchemyError, ValidationError, ValueError) as e:
            db.session.rollback()
            current_app.logger.error("Error loading cycles: %s", e)
            return []

    @staticmethod
    def save_settings(settings: CycleSettings) -> None:
        StorageService._write_blobs({
            STORAGE_KEYS['CYCLE_SETTINGS']: StorageService._settings_payload(settings)
        })

    @staticmethod
    def load_settings() -> CycleSettings:
        try:
            payload = StorageService._read_blob(STORAGE_KEYS['CYCLE_SETTINGS'])
            if not payload:
                return CycleSettings()
            return CycleSettingsSchema().loads(payload)
        except (SQLAlchemyError, ValidationError, ValueError) as e:
            db.session.rollback()
            current_app.logger.error("Error loading settings: %s", e)
            return CycleSettings()

    @staticmethod
    def load_state() -> CycleTrackerState:
        return CycleTrackerState(
            cycles=StorageService.load_cycles(),
            settings=StorageService.load_settings()
        )

    @staticmethod
    def save_state(state: CycleTrackerState) -> None:
        # Cycles and the averages derived from them are committed together
        StorageService._write_blobs({
            STORAGE_KEYS['PERIOD_CYCLES']: StorageService._cycles_payload(state.cycles),
            STORAGE_KEYS['CYCLE_SETTINGS']: StorageService._settings_payload(state.settings)
        })

    @staticmethod
    def clear_all_data() -> None:
        try:
            StoredBlob.query.filter(
                StoredBlob.key.in_(list(STORAGE_KEYS.values()))
            ).delete(synchronize_session=False)
            db.session.commit()
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error("Error clearing data: %s", e)
            raise StorageError("Failed to clear data") from e
