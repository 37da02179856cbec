import time
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from inventory_api.api.errors import register_exception_handlers
from inventory_api.api.health import router as health_router
from inventory_api.api.routes_products import router as products_router
from inventory_api.config import settings
from inventory_api.db import init_db
from inventory_api.utils.logger import get_logger

log = get_logger("http")


@asynccontextmanager
async def lifespan(app: FastAPI):
    # startup; RESET_DB=1 forces a clean table (tests/CI)
    init_db(reset=settings.RESET_DB)
    log.info("%s %s ready", settings.SERVICE_NAME, settings.SERVICE_VERSION)
    yield


app = FastAPI(
    title=settings.SERVICE_NAME, version=settings.SERVICE_VERSION, lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.FRONTEND_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    log.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


register_exception_handlers(app)

app.include_router(health_router)

app.include_router(products_router, prefix="/api/products", tags=["products"])


def run():
    log.info("Inventory Management API listening on %s:%s", settings.APP_HOST, settings.APP_PORT)
    log.info("Health check: http://%s:%s/health", settings.APP_HOST, settings.APP_PORT)
    uvicorn.run(app, host=settings.APP_HOST, port=settings.APP_PORT)


if __name__ == "__main__":
    run()
