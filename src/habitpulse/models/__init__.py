"""SQLModel table exports."""

from .habit import HabitLog
from .settings import UserSetting

__all__ = ["HabitLog", "UserSetting"]
