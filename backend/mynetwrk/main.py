import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mynetwrk.api.routes.ai import router as ai_router
from mynetwrk.api.routes.contacts import router as contacts_router
from mynetwrk.api.routes.groups import router as groups_router
from mynetwrk.api.routes.health import router as health_router
from mynetwrk.api.routes.interaction_types import router as interaction_types_router
from mynetwrk.api.routes.interactions import router as interactions_router
from mynetwrk.api.routes.timezones import router as timezones_router
from mynetwrk.api.routes.users import router as users_router

from mynetwrk.core.config import settings
from mynetwrk.db.base import create_all
from mynetwrk.db.seed import seed_reference_data
from mynetwrk.db.session import SessionLocal, engine
from mynetwrk.exceptions import MyNetwrkError

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.PROJECT_NAME, version="1.0")

allowed_origins = settings.cors_origins_list

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
    allow_headers=["*"],
)


@app.exception_handler(MyNetwrkError)
async def _domain_error(request: Request, exc: MyNetwrkError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(health_router, tags=["health"])
app.include_router(users_router, prefix="/api")
app.include_router(contacts_router, prefix="/api")
app.include_router(groups_router, prefix="/api")
app.include_router(interactions_router, prefix="/api")
app.include_router(interaction_types_router, prefix="/api")
app.include_router(timezones_router, prefix="/api")
app.include_router(ai_router, prefix="/api")


@app.on_event("startup")
def _startup_db() -> None:
    create_all(engine)
    if settings.SEED_ON_STARTUP:
        with SessionLocal() as db:
            seed_reference_data(db)
    logger.info("[DB] Using: %s", engine.url.render_as_string(hide_password=True))
    logger.info("[CORS] allow_origins = %s", allowed_origins)
