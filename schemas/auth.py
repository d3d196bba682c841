from pydantic import BaseModel, Field
from typing import Optional
from .common import BaseRequest, BaseResponse

# ------------------------------- Authentication Models ------------------------------- #

#                          ------- Incoming -------                           #

class UserRegisterReq(BaseRequest):
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

class UserLoginReq(BaseRequest):
    username: str = Field(min_length=1, max_length=255)
    password: str = Field(min_length=1)

#                          ------- Outgoing -------                           #

class UserResponse(BaseModel):
    id: int
    username: str

class UserRegisterResp(BaseResponse):
    """Registration response with the created account"""
    data: Optional[UserResponse] = None

class UserLoginResp(BaseResponse):
    """Login response with the authenticated account"""
    data: Optional[UserResponse] = None
