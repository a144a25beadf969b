"""
Django implementation of LicenseRecordRepository port.

This adapter converts between domain entities and Django ORM models
and translates database faults into ``PersistenceError``.
"""
import functools
import logging
from datetime import datetime
from typing import List, Optional

from asgiref.sync import sync_to_async
from django.db import DatabaseError, IntegrityError
from django.utils import timezone

from core.domain.exceptions import DuplicateLicenseKeyError, PersistenceError
from licenses.domain.license_record import LicenseRecord
from licenses.infrastructure.models import LicenseRecord as LicenseRecordModel
from licenses.ports.license_record_repository import LicenseRecordRepository

logger = logging.getLogger(__name__)


def _translate_db_errors(func):
    """Re-raise database faults from a repository method as PersistenceError."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except IntegrityError:
            raise
        except DatabaseError as e:
            logger.error("Record store failure in %s: %s", func.__name__, e, exc_info=True)
            raise PersistenceError(f"Record store failure: {e}") from e

    return wrapper


class DjangoLicenseRecordRepository(LicenseRecordRepository):
    """
    Django ORM implementation of LicenseRecordRepository.

    Updates are issued as single ``UPDATE ... WHERE key = ?`` statements,
    so concurrent writers to the same key resolve as last write wins.
    """

    def _to_domain(self, model: LicenseRecordModel) -> LicenseRecord:
        """
        Convert Django model to domain entity.

        Args:
            model: Django LicenseRecord model

        Returns:
            LicenseRecord domain entity
        """
        return LicenseRecord(
            key=model.key,
            status=model.status,
            bound_address=model.bound_address,
            last_seen_at=model.last_seen_at,
            created_at=model.created_at,
        )

    def _to_model(self, record: LicenseRecord) -> LicenseRecordModel:
        """
        Convert domain entity to an unsaved Django model.

        Args:
            record: LicenseRecord domain entity

        Returns:
            Django LicenseRecord model
        """
        return LicenseRecordModel(
            key=record.key,
            status=record.status,
            bound_address=record.bound_address,
            last_seen_at=record.last_seen_at,
            created_at=record.created_at,
        )

    @sync_to_async
    @_translate_db_errors
    def find_by_key(self, key: str) -> Optional[LicenseRecord]:
        # pylint: disable=no-member
        model = LicenseRecordModel.objects.filter(key=key).first()
        return self._to_domain(model) if model else None

    @sync_to_async
    @_translate_db_errors
    def add(self, record: LicenseRecord) -> LicenseRecord:
        model = self._to_model(record)
        try:
            model.save(force_insert=True)
        except IntegrityError as e:
            raise DuplicateLicenseKeyError(f"License key {record.key} already exists") from e
        return self._to_domain(model)

    @sync_to_async
    @_translate_db_errors
    def list_all(self) -> List[LicenseRecord]:
        # pylint: disable=no-member
        return [self._to_domain(model) for model in LicenseRecordModel.objects.all()]

    def _update(self, key: str, **fields) -> bool:
        # queryset.update() skips auto_now, so stamp updated_at explicitly
        # pylint: disable=no-member
        updated = LicenseRecordModel.objects.filter(key=key).update(
            updated_at=timezone.now(), **fields
        )
        return updated > 0

    @sync_to_async
    @_translate_db_errors
    def update_binding(self, key: str, address: str, seen_at: datetime) -> bool:
        return self._update(key, bound_address=address, last_seen_at=seen_at)

    @sync_to_async
    @_translate_db_errors
    def touch(self, key: str, seen_at: datetime) -> bool:
        return self._update(key, last_seen_at=seen_at)

    @sync_to_async
    @_translate_db_errors
    def update_status(self, key: str, status: str) -> bool:
        return self._update(key, status=status)

    @sync_to_async
    @_translate_db_errors
    def reset_session(self, key: str) -> bool:
        return self._update(key, bound_address=None, last_seen_at=None)

    @sync_to_async
    @_translate_db_errors
    def delete(self, key: str) -> bool:
        # pylint: disable=no-member
        deleted, _ = LicenseRecordModel.objects.filter(key=key).delete()
        return deleted > 0
