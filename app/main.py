"""Vetrina Team & Cards — pagina pubblica e pannello admin."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from app.core.config import get_static_dir, get_templates_dir, get_upload_dir
from app.core.database import init_db
from app.core.errors import ContentError
from app.routers import all_data_router, cards_router, db_status_router, health_router, teams_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Inizializza logging, tabelle e directory upload all'avvio."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s [%(name)s] %(message)s")
    init_db()
    get_upload_dir().mkdir(parents=True, exist_ok=True)
    yield


app = FastAPI(
    title="Team & Cards Admin",
    description="Gestione dei membri del team e delle card mostrate sulla landing page.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health_router)
app.include_router(db_status_router)
app.include_router(all_data_router)
app.include_router(teams_router)
app.include_router(cards_router)


@app.exception_handler(ContentError)
async def content_error_handler(request: Request, exc: ContentError):
    if exc.status_code >= 500:
        logger.error("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc)
    else:
        logger.warning("%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc)
    return JSONResponse(status_code=exc.status_code, content={"error": str(exc)})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Stessa forma {error} anche per parametri non validi (es. id non intero)."""
    messages = [f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in exc.errors()]
    return JSONResponse(status_code=422, content={"error": "; ".join(messages)})


templates = Jinja2Templates(directory=str(get_templates_dir()))


@app.get("/", include_in_schema=False)
def index(request: Request):
    return templates.TemplateResponse(request, "home.html")


@app.get("/admin", include_in_schema=False)
def page_admin(request: Request):
    return templates.TemplateResponse(request, "admin.html")


# Montata per ultima: le route sopra hanno la precedenza sulla root statica.
static_dir = get_static_dir()
if static_dir.exists():
    app.mount("/", StaticFiles(directory=str(static_dir)), name="static")
