from sqlalchemy import Column, Float, Integer, String, Boolean, DateTime, ForeignKey, Index
from datetime import datetime, timezone
from sqlalchemy.sql import func
import uuid
from healthcalc.db.database import Base
from healthcalc.db.types import GUID, JSONDict, JSONList


def _utcnow():
    # Python-side default keeps sub-second ordering on SQLite
    return datetime.now(timezone.utc)


class BMIRecord(Base):
    __tablename__ = "bmi_records"

    record_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        GUID(), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )

    # Input
    height = Column(Float, nullable=False)  # cm
    weight = Column(Float, nullable=False)  # kg
    age = Column(Integer, nullable=True)
    gender = Column(String, nullable=True)
    use_asian_standard = Column(Boolean, default=False, nullable=False)

    # Result
    bmi = Column(Float, nullable=False)
    category = Column(String, nullable=False)
    category_code = Column(String, nullable=False)
    is_healthy = Column(Boolean, nullable=False)
    who_standard = Column(String, nullable=False)
    health_risks = Column(JSONList(), nullable=False, default=list)
    recommendations = Column(JSONList(), nullable=False, default=list)
    severity = Column(String, nullable=False)
    color_code = Column(String, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        default=_utcnow,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (Index("ix_bmi_records_user_created", "user_id", "created_at"),)


class TDEERecord(Base):
    __tablename__ = "tdee_records"

    record_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    user_id = Column(
        GUID(), ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False
    )

    # Input
    height = Column(Float, nullable=False)
    weight = Column(Float, nullable=False)
    age = Column(Integer, nullable=False)
    gender = Column(String, nullable=False)
    activity_level = Column(String, nullable=False)
    formula = Column(String, nullable=False, default="mifflin_st_jeor")
    body_fat_percentage = Column(Float, nullable=True)

    # Result
    bmr = Column(Float, nullable=False)
    tdee = Column(Float, nullable=False)
    activity_multiplier = Column(Float, nullable=False)
    macronutrients = Column(JSONDict(), nullable=False, default=dict)
    calorie_goals = Column(JSONDict(), nullable=False, default=dict)
    nutrition_advice = Column(JSONList(), nullable=False, default=list)

    created_at = Column(
        DateTime(timezone=True),
        default=_utcnow,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_tdee_records_user_created", "user_id", "created_at"),
    )
