"""
Browser-facing app: the page at "/", its assets under /static, and the JSON
API mounted underneath everything else.

    uvicorn vedavision.web.app:app --port 8000
"""
from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from pathlib import Path

root = Path(__file__).resolve().parent


def create_web_app(api_app: FastAPI) -> FastAPI:
    app = FastAPI(title="vedavision web")
    page = (root / "templates" / "index.html").read_text(encoding="utf-8")

    # "/" must be registered BEFORE the catch-all mount("") or it gets intercepted
    @app.get("/", response_class=HTMLResponse)
    def index():
        return page

    app.mount("/static", StaticFiles(directory=str(root / "static")), name="static")

    # API sub-app last: the catch-all prefix "" would shadow routes above it
    app.mount("", api_app)
    return app


def _default_app() -> FastAPI:
    from vedavision.services.api import app as api_app
    return create_web_app(api_app)


app = _default_app()
