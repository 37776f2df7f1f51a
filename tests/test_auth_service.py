import pytest

from core.config import Settings
from core.errors import InvalidMobileNumber, InvalidOtp, UserNotFound
from services.auth_service import AuthService


@pytest.fixture
def auth(store):
    return AuthService(store, Settings(SIMULATED_OTP="654321"))


@pytest.mark.parametrize("mobile", ["", "12345", "98765432101", "98765abcde"])
def test_invalid_mobile(auth, mobile):
    with pytest.raises(InvalidMobileNumber):
        auth.request_otp(mobile)


def test_request_and_verify(auth):
    message = auth.request_otp("9876543210")
    assert "654321" in message

    user, token = auth.verify_otp("9876543210", "654321")

    assert user.mobile == "9876543210"
    assert auth.current_user(token) == user


def test_same_mobile_reuses_user(auth):
    auth.request_otp("9876543210")
    first, _ = auth.verify_otp("9876543210", "654321")
    auth.request_otp("9876543210")
    second, _ = auth.verify_otp("9876543210", "654321")

    assert first.id == second.id


def test_wrong_otp_consumes_code(auth):
    auth.request_otp("9876543210")

    with pytest.raises(InvalidOtp):
        auth.verify_otp("9876543210", "000000")
    with pytest.raises(InvalidOtp):
        auth.verify_otp("9876543210", "654321")


def test_verify_without_request(auth):
    with pytest.raises(InvalidOtp):
        auth.verify_otp("9876543210", "654321")


def test_logout_invalidates_token(auth):
    auth.request_otp("9876543210")
    _, token = auth.verify_otp("9876543210", "654321")

    auth.logout(token)

    with pytest.raises(UserNotFound):
        auth.current_user(token)
    with pytest.raises(UserNotFound):
        auth.current_user(None)
