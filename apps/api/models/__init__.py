from apps.api.models.history import UserHistory
from apps.api.models.user import User

__all__ = ["UserHistory", "User"]
