"""
Record persistence.

Owner-scoped CRUD for BMI and TDEE calculation records. Every query filters on
user_id, so a record id belonging to another user behaves as if it did not exist.
"""

import logging
from typing import Any, Dict, List, Optional
from uuid import UUID

from sqlalchemy import desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from healthcalc.domain.errors import PersistenceError
from healthcalc.models.calculation_record import BMIRecord, TDEERecord

logger = logging.getLogger(__name__)


class RecordRepository:
    """Base repository; subclasses set ``model``."""

    model = None

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, action: str, error: SQLAlchemyError) -> PersistenceError:
        self.db.rollback()
        logger.error(
            f"[RECORDS] {action} failed on {self.model.__tablename__}: {error}"
        )
        return PersistenceError(f"Failed to {action} {self.model.__tablename__}")

    def create(
        self, user_id: UUID, measurement: Dict[str, Any], result: Dict[str, Any]
    ):
        """
        Persist one calculation.

        Args:
            user_id: Owning user
            measurement: Input columns (height, weight, ...)
            result: Result columns (bmi, category_code, ...)

        Returns:
            The stored record, refreshed with its id and created_at
        """
        record = self.model(user_id=user_id, **measurement, **result)
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError as e:
            raise self._fail("create", e)
        return record

    def list_by_user(self, user_id: UUID, limit: int) -> List[Any]:
        """Newest first, at most ``limit`` records."""
        try:
            return (
                self.db.query(self.model)
                .filter(self.model.user_id == user_id)
                .order_by(desc(self.model.created_at))
                .limit(limit)
                .all()
            )
        except SQLAlchemyError as e:
            raise self._fail("list", e)

    def latest(self, user_id: UUID) -> Optional[Any]:
        records = self.list_by_user(user_id, limit=1)
        return records[0] if records else None

    def delete_one(self, record_id: UUID, user_id: UUID) -> bool:
        """Delete a record owned by ``user_id``. Returns False if nothing matched."""
        try:
            deleted = (
                self.db.query(self.model)
                .filter(
                    self.model.record_id == record_id,
                    self.model.user_id == user_id,
                )
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete", e)
        return deleted > 0

    def clear_all(self, user_id: UUID) -> int:
        """Delete every record of the user. Returns the number removed."""
        try:
            deleted = (
                self.db.query(self.model)
                .filter(self.model.user_id == user_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("clear", e)
        return deleted


class BMIRecordRepository(RecordRepository):
    model = BMIRecord


class TDEERecordRepository(RecordRepository):
    model = TDEERecord
