from fastapi import status
from fastapi.responses import RedirectResponse
from starlette.requests import Request

from app.core.session import flash


def redirect_to(path: str) -> RedirectResponse:
    # 303：表单 POST 之后浏览器以 GET 访问目标页
    return RedirectResponse(url=path, status_code=status.HTTP_303_SEE_OTHER)


def flash_and_redirect(request: Request, category: str, message: str, path: str) -> RedirectResponse:
    flash(request, category, message)
    return redirect_to(path)
