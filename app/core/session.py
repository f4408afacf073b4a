"""会话身份与一次性提示（flash）。

会话数据由 Starlette SessionMiddleware 存在签名 cookie 中：
- ``user``：当前登录用户的身份快照（SessionIdentity.to_session()）；
- ``_flashes``：待展示的提示，[[category, message], ...]，读取后即清空。

身份快照是不可变值：资料修改后整体替换（store_session_identity），不原地修改字段。
"""
from dataclasses import asdict, dataclass, replace
from typing import Any

from starlette.requests import Request

ROLE_STUDENT = "student"
ROLE_TEACHER = "teacher"
ROLES = frozenset({ROLE_STUDENT, ROLE_TEACHER})

_USER_KEY = "user"
_FLASH_KEY = "_flashes"


@dataclass(frozen=True)
class SessionIdentity:
    user_id: int
    username: str
    full_name: str
    role: str

    @property
    def is_teacher(self) -> bool:
        return self.role == ROLE_TEACHER

    @classmethod
    def from_user(cls, user: Any) -> "SessionIdentity":
        return cls(
            user_id=user.id,
            username=user.username or "",
            full_name=user.full_name or user.username or "",
            role=user.role,
        )

    @classmethod
    def from_session(cls, data: Any) -> "SessionIdentity | None":
        """从 cookie 中的字典还原；结构不完整时视为未登录。"""
        if not isinstance(data, dict):
            return None
        try:
            return cls(
                user_id=int(data["user_id"]),
                username=str(data.get("username") or ""),
                full_name=str(data.get("full_name") or ""),
                role=str(data["role"]),
            )
        except (KeyError, TypeError, ValueError):
            return None

    def to_session(self) -> dict[str, Any]:
        return asdict(self)

    def with_full_name(self, full_name: str) -> "SessionIdentity":
        return replace(self, full_name=full_name)


def get_session_identity(request: Request) -> SessionIdentity | None:
    return SessionIdentity.from_session(request.session.get(_USER_KEY))


def store_session_identity(request: Request, identity: SessionIdentity) -> None:
    request.session[_USER_KEY] = identity.to_session()


def clear_session(request: Request) -> None:
    request.session.clear()


def flash(request: Request, category: str, message: str) -> None:
    flashes = list(request.session.get(_FLASH_KEY) or [])
    flashes.append([category, message])
    request.session[_FLASH_KEY] = flashes


def pop_flashed_messages(request: Request) -> dict[str, list[str]]:
    """取出并清空所有提示，按 category 分组：{"success": [...], "error": [...]}。"""
    messages: dict[str, list[str]] = {}
    for category, message in request.session.pop(_FLASH_KEY, None) or []:
        messages.setdefault(category, []).append(message)
    return messages
