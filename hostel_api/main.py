"""
FastAPI app entry point
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import settings
from .db import engine, Base, SessionLocal

# Import models so every table is registered on Base.metadata
from . import models  # noqa: F401
from .CRUD import admin_crud
from .models.food_item import FoodItem
from .scripts.seed_menu import seed_menu

# Import routes
from .routes import (
    admin,
    food_items,
    orders,
    reports,
)
from .routes import settings as settings_routes

# Setup logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def ensure_default_admin():
    """
    Ensure the bootstrap admin exists when DEFAULT_ADMIN_USERNAME and
    DEFAULT_ADMIN_PASSWORD are configured.
    """
    if not settings.DEFAULT_ADMIN_USERNAME or not settings.DEFAULT_ADMIN_PASSWORD:
        logger.info("ℹ️ No default admin configured, skipping")
        return

    db = SessionLocal()
    try:
        user = admin_crud.ensure_admin_exists(
            db, settings.DEFAULT_ADMIN_USERNAME, settings.DEFAULT_ADMIN_PASSWORD)
        logger.info(f"✅ Default admin ready: {user.username}")
    except SQLAlchemyError:
        logger.exception("❌ Error ensuring default admin")
        db.rollback()
    finally:
        db.close()


def seed_initial_menu():
    """Seed the menu only when the catalog is completely empty"""
    db = SessionLocal()
    try:
        if db.query(FoodItem).count() > 0:
            logger.info("ℹ️ Food catalog already has data, skipping seed")
            return
        seed_menu(db)
    except SQLAlchemyError:
        logger.exception("❌ Seed error")
        db.rollback()
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info("=" * 60)
    logger.info(f"🚀 Starting {settings.APP_NAME} in {settings.ENVIRONMENT} mode...")
    logger.info("=" * 60)

    for warning in settings.validate_settings():
        logger.warning(f"⚠️ {warning}")

    if settings.CREATE_TABLES:
        Base.metadata.create_all(bind=engine)
        logger.info("✅ Database tables created/verified")

    ensure_default_admin()

    if settings.SEED_MENU:
        seed_initial_menu()

    logger.info("✅ Application ready!")

    yield

    # Shutdown
    logger.info("👋 Shutting down...")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    docs_url="/docs" if not settings.is_production else None,
    redoc_url="/redoc" if not settings.is_production else None,
    lifespan=lifespan
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ============ error handlers ============
# Every error leaves the API as {"error": "<message>"}

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    detail = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": detail},
        headers=getattr(exc, "headers", None),
    )


def _format_validation_error(error: dict) -> str:
    location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
    field = ".".join(location)
    return f"{field}: {error.get('msg')}" if field else str(error.get("msg"))


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = "; ".join(_format_validation_error(e) for e in exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": message or "Invalid request"},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # details stay in the server log
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": "Internal server error"},
    )


@app.get("/")
async def root():
    return {
        "status": "ok",
        "message": settings.APP_NAME,
        "environment": settings.ENVIRONMENT,
        "debug": settings.DEBUG,
        "docs": "/docs"
    }


@app.get("/health")
def health_check():
    """Health check endpoint with database status"""
    database = "connected"
    try:
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Health check database error: {e}")
        database = "unavailable"

    return {
        "status": "healthy" if database == "connected" else "degraded",
        "environment": settings.ENVIRONMENT,
        "database": database,
    }


# Register routers
app.include_router(admin.router)
app.include_router(settings_routes.router)
app.include_router(food_items.router)
app.include_router(orders.router)
app.include_router(reports.router)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("hostel_api.main:app", host=settings.HOST, port=settings.PORT, reload=False)
