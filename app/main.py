import logging
import os
import time
from pathlib import Path

# 在导入 config 前加载项目根目录 .env，与脚本使用同一 DATABASE_URL
_root = Path(__file__).resolve().parent.parent
_env = _root / ".env"
if _env.is_file():
    with open(_env, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and "=" in line and not line.startswith("#"):
                k, _, v = line.partition("=")
                k, v = k.strip(), v.strip()
                if k and os.environ.get(k) is None:
                    os.environ[k] = v

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.middleware.sessions import SessionMiddleware
from starlette.requests import Request

from app.api.redirects import redirect_to
from app.api.router import site_router
from app.core.config import settings
from app.core.exceptions import LoginRequiredError

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        elapsed = (time.perf_counter() - start) * 1000
        addr = request.client.host if request.client else "-"
        logger.info(f'{addr} - "{request.method} {request.url.path}" {response.status_code} ({elapsed:.0f}ms)')
        return response


async def login_required_handler(request: Request, exc: LoginRequiredError):
    return redirect_to("/login")


def create_app() -> FastAPI:
    app = FastAPI(title="GyanGanga")
    app.add_middleware(RequestLogMiddleware)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.secret_key,
        session_cookie=settings.session_cookie,
        max_age=settings.session_max_age,
        same_site="lax",
        https_only=settings.is_production,
    )
    app.add_exception_handler(LoginRequiredError, login_required_handler)
    app.include_router(site_router)
    return app


app = create_app()
