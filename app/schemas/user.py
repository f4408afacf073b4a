"""用户/个人资料/排行榜相关模型。"""
from pydantic import BaseModel, Field

from app.core.session import SessionIdentity


class SessionUser(BaseModel):
    """页面头部展示用的当前用户，来自会话身份快照。"""
    id: int
    username: str = ""
    fullName: str = ""
    role: str

    @classmethod
    def from_identity(cls, identity: SessionIdentity) -> "SessionUser":
        return cls(
            id=identity.user_id,
            username=identity.username,
            fullName=identity.full_name,
            role=identity.role,
        )


class UserProfile(BaseModel):
    """个人资料，字段与资料页表单一致。"""
    id: int
    username: str = ""
    fullName: str = Field("", validation_alias="full_name")
    email: str = ""
    role: str
    phoneNumber: str | None = Field(None, validation_alias="phone_number")
    schoolName: str | None = Field(None, validation_alias="school_name")
    grade: str | None = None
    city: str | None = None
    xp: int = 0

    model_config = {"from_attributes": True, "populate_by_name": True}


class LeaderboardEntry(BaseModel):
    id: int
    fullName: str = Field("", validation_alias="full_name")
    username: str
    city: str | None = None
    xp: int = 0

    model_config = {"from_attributes": True, "populate_by_name": True}
