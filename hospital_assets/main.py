import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from hospital_assets.config import settings
from hospital_assets.db import create_db_and_tables
from hospital_assets.errors import DomainError
from hospital_assets.routers import assets, maintenance, repair_history, repair_requests, reports, users

logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    create_db_and_tables()
    logger.info("tables ready")
    yield
    logger.info("shutting down")


app = FastAPI(title=settings.app_title, lifespan=lifespan)

app.include_router(users.router)
app.include_router(assets.router)
app.include_router(repair_requests.router)
app.include_router(maintenance.router)
app.include_router(repair_history.router)
app.include_router(reports.router)


@app.get("/health")
def health():
    return {"ok": True}


@app.exception_handler(DomainError)
async def domain_error_handler(request: Request, exc: DomainError):
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.to_detail()})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content=jsonable_encoder(
            {"code": "VALIDATION_ERROR", "message": "Request validation failed", "errors": exc.errors()}
        ),
    )
