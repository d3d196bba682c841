from fastapi import APIRouter, Request

from services.auth_service import AuthService
from schemas.auth import UserRegisterReq, UserLoginReq, UserRegisterResp, UserLoginResp
from core.rate_limit import limiter, AUTH_RATE_LIMIT

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post('/register', response_model=UserRegisterResp)
@limiter.limit(AUTH_RATE_LIMIT)
async def register_user(request: Request, req: UserRegisterReq):
    return await AuthService.register(req.username, req.password)


@router.post('/login', response_model=UserLoginResp)
@limiter.limit(AUTH_RATE_LIMIT)
async def login_user(request: Request, req: UserLoginReq):
    return await AuthService.login(req.username, req.password)
