from pydantic import BaseModel, EmailStr


# Sign-up payload
class UserCreate(BaseModel):
    name: str
    email: EmailStr
    password: str


# Login payload
class UserLogin(BaseModel):
    email: EmailStr
    password: str


# Public user fields (never the password hash!)
class UserResponse(BaseModel):
    id: int
    email: str
    name: str

    class Config:
        from_attributes = True


class AuthResponse(BaseModel):
    token: str
    user: UserResponse
