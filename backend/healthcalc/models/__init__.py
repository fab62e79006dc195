from .user import User
from .calculation_record import BMIRecord, TDEERecord

__all__ = [
    "User",
    "BMIRecord",
    "TDEERecord",
]
