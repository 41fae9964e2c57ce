import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from inventory_api.config import Settings, get_settings
from inventory_api.core.exceptions import InventoryError
from inventory_api.core.logging import setup_logging
from inventory_api.database import init_db
from inventory_api.routers import (
    auth_router,
    categories_router,
    health_router,
    items_router,
    reports_router,
    sales_router,
    stats_router,
    users_router,
)

setup_logging()
settings: Settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    init_db()
    logger.info("%s started (%s)", settings.APP_NAME, settings.ENVIRONMENT)
    yield


app = FastAPI(title=settings.APP_NAME, lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.CORS_ORIGINS.split(",") if origin.strip()],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(InventoryError)
async def inventory_error_handler(request: Request, exc: InventoryError):
    logger.info(
        "%s %s -> %s: %s", request.method, request.url.path, exc.code, exc.message,
        extra={"path": request.url.path, "status": exc.status_code},
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


app.include_router(health_router)
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(categories_router)
app.include_router(items_router)
app.include_router(sales_router)
app.include_router(reports_router)
app.include_router(stats_router)


@app.get("/")
def root():
    return {"message": "API is working!"}


__all__ = ["app", "root"]
