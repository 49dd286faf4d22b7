# cctvlog/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cctvlog.api.v1.api import api_router
from cctvlog.core.config import settings
from cctvlog.core.exceptions import CCTVLogError
from cctvlog.db.session import init_db

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger("cctvlog.main")

app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CCTVLogError)
async def cctvlog_error_handler(request: Request, exc: CCTVLogError) -> JSONResponse:
    # mesmo formato do HTTPException
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.on_event("startup")
async def on_startup() -> None:
    logger.info("Inicializando tabelas (%s)", settings.APP_NAME)
    await init_db()


@app.get("/health", tags=["health"])
async def healthcheck():
    return {"status": "ok"}


app.include_router(api_router, prefix="/api/v1")
