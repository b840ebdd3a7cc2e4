"""User endpoints."""
import logging

from flask import Blueprint, jsonify

from booking_platform.application.use_cases.register_user_use_case import (
    GetUserUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
)
from booking_platform.domain.interfaces.presenter import IUserPresenter
from booking_platform.middleware.monitoring import track_request
from booking_platform.views.helpers import parse_body, resolve
from booking_platform.views.schemas import RegisterUserBody


users_blueprint = Blueprint("users", __name__)
_logger = logging.getLogger(__name__)


@users_blueprint.route("/users", methods=["POST"])
@track_request("register_user")
def register_user():
    """
    Register a user.

    Expected payload:
    {
        "name": "Ada Lovelace",
        "email": "ada@example.com"
    }
    """
    body = parse_body(RegisterUserBody)
    use_case: RegisterUserUseCase = resolve(RegisterUserUseCase)
    user = use_case.execute(RegisterUserRequest(name=body.name, email=body.email))
    return jsonify({"status": "success", "user": resolve(IUserPresenter).present(user)}), 201


@users_blueprint.route("/users/<user_id>", methods=["GET"])
@track_request("get_user")
def get_user(user_id: str):
    """Get a user by id."""
    user = resolve(GetUserUseCase).execute(user_id)
    return jsonify({"status": "success", "user": resolve(IUserPresenter).present(user)}), 200
