import asyncio
from datetime import datetime

from peewee import IntegrityError, PeeweeException

from core.logging import get_logger
from core.security import hash_password, check_password
from db.base import db
from db.models.usr.users import User
from schemas.auth import UserRegisterResp, UserLoginResp, UserResponse
from schemas.common import ApiStatus


class AuthService:

    @staticmethod
    async def register(username: str, password: str) -> UserRegisterResp:
        log = get_logger("auth_service")

        try:
            hashed_password = hash_password(password)
        except ValueError as validation_error:
            log.warning("register_validation_error", error=str(validation_error))
            return UserRegisterResp(
                status=ApiStatus.VALIDATION_ERROR,
                message="Invalid request data",
                error_code="VALIDATION_ERROR"
            )

        def _create():
            with db.connection_context():
                if User.select().where(User.username == username).exists():
                    return None
                return User.create(
                    username=username,
                    password=hashed_password,
                    created_at=datetime.now()
                )

        try:
            user = await asyncio.to_thread(_create)
        except IntegrityError:
            user = None
        except PeeweeException as e:
            log.error("register_error", error=str(e))
            return UserRegisterResp(
                status=ApiStatus.ERROR,
                message="Registration failed",
                error_code="INTERNAL_ERROR"
            )

        if user is None:
            return UserRegisterResp(
                status=ApiStatus.CONFLICT,
                message="Username is already registered",
                error_code="USERNAME_ALREADY_EXISTS"
            )

        log.info("user_registered", user_id=user.id)
        return UserRegisterResp(
            status=ApiStatus.SUCCESS,
            message="Account created successfully",
            data=UserResponse(id=user.id, username=user.username)
        )

    @staticmethod
    async def login(username: str, password: str) -> UserLoginResp:
        log = get_logger("auth_service")

        def _lookup():
            with db.connection_context():
                return User.select().where(User.username == username).first()

        try:
            user = await asyncio.to_thread(_lookup)
        except PeeweeException as e:
            log.error("login_error", error=str(e))
            return UserLoginResp(
                status=ApiStatus.ERROR,
                message="Login failed",
                error_code="INTERNAL_ERROR"
            )

        if not user:
            return UserLoginResp(
                status=ApiStatus.AUTHENTICATION_ERROR,
                message="User not found",
                error_code="USER_NOT_FOUND"
            )

        try:
            valid_password = check_password(password, user.password)
        except ValueError:
            valid_password = False

        if not valid_password:
            return UserLoginResp(
                status=ApiStatus.AUTHENTICATION_ERROR,
                message="Invalid password",
                error_code="INVALID_PASSWORD"
            )

        return UserLoginResp(
            status=ApiStatus.SUCCESS,
            message="Login successful",
            data=UserResponse(id=user.id, username=user.username)
        )
