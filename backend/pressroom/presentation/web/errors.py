"""Error pages — renders HTTP errors as HTML instead of JSON."""

from fastapi import FastAPI, Request
from starlette.exceptions import HTTPException as StarletteHTTPException

_TITLES = {
    400: "Bad Request",
    404: "Not Found",
    415: "Unsupported Media Type",
}


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error_page(request: Request, exc: StarletteHTTPException):
        renderer = request.app.state.renderer
        return renderer.render(
            request,
            "error.html",
            _TITLES.get(exc.status_code, "Error"),
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
            error_status=exc.status_code,
            detail=exc.detail,
        )
