import logging
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles

from .config import Settings
from .controls import sync_category_controls
from .models import LinkIn
from .state import LinkStoreController
from .storage import FileStore
from .validation import LinkValidationError

logger = logging.getLogger(__name__)


def get_controller(request: Request) -> LinkStoreController:
    return request.app.state.controller


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    app = FastAPI(title="LinkShelf")
    app.state.settings = settings
    app.state.controller = LinkStoreController(
        FileStore(settings.data_dir), settings.storage_key
    )

    # Serve static assets (JS, CSS)
    if settings.frontend_dir.is_dir():
        app.mount("/static", StaticFiles(directory=settings.frontend_dir), name="static")
    else:
        logger.warning("Frontend directory %s not found; only the API is served", settings.frontend_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    def serve_index():
        index = settings.frontend_dir / "index.html"
        if not index.is_file():
            raise HTTPException(404, "Frontend not installed")
        return FileResponse(index)

    @app.get("/api/links")
    def list_links(
        q: str = "",
        category: str = "",
        controller: LinkStoreController = Depends(get_controller),
    ):
        return controller.view(q, category)

    @app.post("/api/links")
    def add_link(body: LinkIn, controller: LinkStoreController = Depends(get_controller)):
        try:
            link = controller.add(body.title, body.url, body.category)
        except LinkValidationError as exc:
            raise HTTPException(400, {"errors": exc.errors})
        return {"link": link}

    @app.delete("/api/links/{link_id}")
    def delete_link(link_id: str, controller: LinkStoreController = Depends(get_controller)):
        if not controller.delete(link_id):
            raise HTTPException(404, "Link not found")
        return {"ok": True}

    @app.get("/api/categories")
    def categories(current: str = "", controller: LinkStoreController = Depends(get_controller)):
        return sync_category_controls(controller.links, current)

    @app.get("/api/export/json")
    def export_json(controller: LinkStoreController = Depends(get_controller)):
        return controller.links

    @app.get("/api/export/txt", response_class=PlainTextResponse)
    def export_txt(controller: LinkStoreController = Depends(get_controller)):
        return "\n".join(link.url for link in controller.links)

    return app


app = create_app()
