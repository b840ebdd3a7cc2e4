"""User presenter (view model builder)."""
from typing import Any, Dict

from booking_platform.domain.entities.user import User
from booking_platform.domain.interfaces.presenter import IUserPresenter


class UserPresenter(IUserPresenter):

    def present(self, user: User) -> Dict[str, Any]:
        return {
            "user_id": user.user_id,
            "name": user.name,
            "email": user.email,
            "created_at": user.created_at.isoformat() if user.created_at else None,
        }
