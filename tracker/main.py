import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator

from tracker.controllers import all_routers
from tracker.core.config import settings
from tracker.core.database import dispose_db, init_db
from tracker.core.exceptions import BusinessException, ErrorCode
from tracker.core.middleware import LoggingMiddleware

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_CREATE_TABLES:
        await init_db()
    logger.info(f"🚀 Tracker Service started on {settings.HOST}:{settings.PORT}")
    yield
    await dispose_db()
    logger.info("Tracker Service stopped")


app = FastAPI(
    title="Tracker Service",
    description="Projects and tasks: CRUD over a relational store",
    version="1.0.0",
    lifespan=lifespan,
)

# =================================================================
# 1. CORS 설정
# =================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS"],
    allow_headers=["*"],
)

# =================================================================
# 2. 미들웨어 및 모니터링
# =================================================================
app.add_middleware(LoggingMiddleware)
Instrumentator().instrument(app).expose(app)

# =================================================================
# 3. 라우터 등록
# =================================================================
for router, prefix, tag in all_routers:
    app.include_router(router, prefix=prefix, tags=[tag])


# =================================================================
# 4. 예외 핸들러
# =================================================================
def _error_body(code: str, message: str, data=None) -> dict:
    return {"success": False, "code": code, "message": message, "data": data}


@app.exception_handler(BusinessException)
async def business_exception_handler(request: Request, exc: BusinessException):
    if exc.error_code.http_status >= 500:
        logger.error(f"❌ {request.method} {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.error_code.http_status,
        content=_error_body(exc.error_code.biz_code, exc.message),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in exc.errors()]
    logger.warning(f"⚠️ Validation Error on {request.url.path}: {errors}")
    return JSONResponse(
        status_code=ErrorCode.INVALID_INPUT.http_status,
        content=_error_body(ErrorCode.INVALID_INPUT.biz_code, "Request validation failed", errors),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"❌ Unhandled error on {request.method} {request.url.path}")
    error_code = ErrorCode.INTERNAL_SERVER_ERROR
    return JSONResponse(
        status_code=error_code.http_status,
        content=_error_body(error_code.biz_code, error_code.default_message),
    )


@app.get("/")
async def root():
    return {"message": "Tracker Service is running", "service": "tracker-service"}


def run() -> None:
    uvicorn.run("tracker.main:app", host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
