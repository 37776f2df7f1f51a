from fastapi import APIRouter, Depends, Header, HTTPException
from typing import Optional

from core.errors import GuidanceError
from models.schemas import LoginResponse, OtpRequest, OtpVerifyRequest, User
from routers.deps import get_auth, get_current_user, get_workflow, to_http
from services.assessment_workflow import AssessmentWorkflow
from services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/otp/request")
async def request_otp(request: OtpRequest, auth: AuthService = Depends(get_auth)):
    try:
        return {"success": True, "message": auth.request_otp(request.mobile)}
    except GuidanceError as e:
        raise to_http(e)


@router.post("/otp/verify", response_model=LoginResponse)
async def verify_otp(request: OtpVerifyRequest, auth: AuthService = Depends(get_auth)):
    try:
        user, token = auth.verify_otp(request.mobile, request.otp)
    except GuidanceError as e:
        raise to_http(e)
    return LoginResponse(user=user, session_token=token, message="Logged in successfully")


@router.post("/logout")
async def logout(
    x_session_token: Optional[str] = Header(default=None),
    auth: AuthService = Depends(get_auth),
    workflow: AssessmentWorkflow = Depends(get_workflow),
):
    try:
        user = auth.current_user(x_session_token)
    except GuidanceError:
        raise HTTPException(status_code=401, detail="Not logged in")
    auth.logout(x_session_token)
    workflow.logout(user.id)
    return {"success": True, "message": "Logged out"}


@router.get("/me", response_model=User)
async def me(user: User = Depends(get_current_user)):
    return user
