from sqlalchemy import Column, String, DateTime, Integer
from sqlalchemy.sql import func
import uuid
from healthcalc.db.database import Base
from healthcalc.db.types import GUID


class User(Base):
    __tablename__ = "users"

    user_id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    gender = Column(String, nullable=True)  # "male" or "female"
    age = Column(Integer, nullable=True)
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
