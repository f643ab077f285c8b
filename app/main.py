from fastapi import Depends, FastAPI, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from motor.motor_asyncio import AsyncIOMotorCollection
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import uvicorn

from app.core.config import settings
from app.core.database import (
    close_mongo_connection,
    connect_to_mongo,
    get_collection,
    get_product_collection,
    ping,
)
from app.core.logging import setup_logging
from app.middleware.logging_middleware import LoggingMiddleware, StructlogMiddleware
from app.controllers import product_controller

APP_VERSION = "1.0.0"

logger = setup_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup", environment=settings.environment)
    try:
        client = await connect_to_mongo()
    except Exception as e:
        logger.error("Failed to connect to MongoDB", error=str(e))
        raise

    app.state.mongo_client = client
    app.state.product_collection = get_collection(client)

    yield

    logger.info("Application shutdown")
    try:
        await close_mongo_connection(client)
    except Exception as e:
        logger.error("Error during shutdown", error=str(e))


app = FastAPI(
    title="Product Catalog API",
    description="CRUD API for products backed by MongoDB",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.environment == "local" else None,
    redoc_url="/redoc" if settings.environment == "local" else None,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# StructlogMiddleware reads the request id that LoggingMiddleware assigns
app.add_middleware(StructlogMiddleware)
app.add_middleware(LoggingMiddleware)

app.include_router(product_controller.router)


@app.get("/")
async def root():
    return {
        "message": "Product Catalog API is running",
        "version": APP_VERSION,
        "environment": settings.environment,
    }


@app.get("/health")
async def health_check(collection: AsyncIOMotorCollection = Depends(get_product_collection)):
    if await ping(collection):
        return {"status": "healthy", "environment": settings.environment}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy", "environment": settings.environment},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc):
    logger.warning(
        "HTTP Exception",
        status_code=exc.status_code,
        detail=exc.detail,
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc):
    errors = jsonable_encoder(exc.errors())
    logger.warning(
        "Request validation failed",
        path=request.url.path,
        method=request.method,
        errors=errors
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Validation failed", "details": errors}
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.error(
        "Unhandled Exception",
        error=str(exc),
        path=request.url.path,
        method=request.method
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"}
    )


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "local",
        log_config=None
    )
