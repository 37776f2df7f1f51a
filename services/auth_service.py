"""
Simulated mobile-number login.

There is no SMS provider: the OTP is a fixed configured value that is stored
per number when requested and consumed on the first verification attempt.
"""
import logging
import re
import secrets
from typing import Optional, Tuple

from core.config import Settings, settings as default_settings
from core.errors import InvalidMobileNumber, InvalidOtp, UserNotFound
from core.storage import KeyValueStore, StorageKey
from models.schemas import User
from core.ids import new_id

logger = logging.getLogger(__name__)

MOBILE_PATTERN = re.compile(r"^\d{10}$")


class UserRepository:
    def __init__(self, store: KeyValueStore) -> None:
        self.store = store

    def get_by_mobile(self, mobile: str) -> Optional[User]:
        for doc in self.store.get_list(StorageKey.USERS):
            if doc.get("mobile") == mobile:
                return User(**doc)
        return None

    def get_by_id(self, user_id: str) -> Optional[User]:
        for doc in self.store.get_list(StorageKey.USERS):
            if doc.get("id") == user_id:
                return User(**doc)
        return None

    def create(self, mobile: str) -> User:
        user = User(id=new_id("user"), mobile=mobile)
        users = self.store.get_list(StorageKey.USERS)
        users.append(user.to_doc())
        self.store.set(StorageKey.USERS, users)
        return user


class AuthService:
    def __init__(self, store: KeyValueStore, settings: Optional[Settings] = None) -> None:
        self.store = store
        self.settings = settings or default_settings
        self.users = UserRepository(store)

    def request_otp(self, mobile: str) -> str:
        mobile = (mobile or "").strip()
        if not MOBILE_PATTERN.match(mobile):
            raise InvalidMobileNumber(mobile)
        self.store.set(StorageKey.otp(mobile), self.settings.SIMULATED_OTP)
        logger.info(f"Simulated OTP issued for {mobile[-4:].rjust(10, '*')}")
        return f"OTP sent to {mobile}. (Hint: use {self.settings.SIMULATED_OTP})"

    def verify_otp(self, mobile: str, otp: str) -> Tuple[User, str]:
        mobile = (mobile or "").strip()
        key = StorageKey.otp(mobile)
        expected = self.store.get(key)
        # One attempt per issued code
        self.store.delete(key)
        if expected is None or (otp or "").strip() != expected:
            raise InvalidOtp()

        user = self.users.get_by_mobile(mobile) or self.users.create(mobile)
        token = secrets.token_urlsafe(24)
        sessions = self.store.get_dict(StorageKey.SESSIONS)
        sessions[token] = user.id
        self.store.set(StorageKey.SESSIONS, sessions)
        logger.info(f"User {user.id} logged in")
        return user, token

    def current_user(self, token: Optional[str]) -> User:
        if not token:
            raise UserNotFound()
        user_id = self.store.get_dict(StorageKey.SESSIONS).get(token)
        user = self.users.get_by_id(user_id) if user_id else None
        if user is None:
            raise UserNotFound()
        return user

    def logout(self, token: Optional[str]) -> None:
        sessions = self.store.get_dict(StorageKey.SESSIONS)
        if token and sessions.pop(token, None) is not None:
            self.store.set(StorageKey.SESSIONS, sessions)
