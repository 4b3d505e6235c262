import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Import models so every table is registered with Base before create_all
from . import models  # noqa: F401
from .config import ALLOWED_ORIGINS, SEED_ON_STARTUP
from .database import Base, SessionLocal, engine
from .domain.booking_services.router import router as booking_services_router
from .domain.bookings.router import router as bookings_router
from .domain.notifications.router import router as notifications_router
from .domain.owners.router import router as owners_router
from .domain.pets.router import router as pets_router
from .domain.photographers.router import router as photographers_router
from .domain.services.router import router as services_router
from .routes import auth_router
from .seed import seed_database
from .shared.exceptions import DomainException

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Reduce verbosity of third-party libraries
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application starting up...")
    Base.metadata.create_all(bind=engine, checkfirst=True)
    logger.info("Database tables created successfully")

    if SEED_ON_STARTUP:
        db = SessionLocal()
        try:
            seed_database(db)
        finally:
            db.close()

    yield
    logger.info("Application shutting down...")


app = FastAPI(title="Pet Photography Booking API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(DomainException)
async def domain_exception_handler(request: Request, exc: DomainException):
    """Translate service-layer errors into their HTTP status"""
    logger.warning(f"{exc.code} on {request.method} {request.url.path}: {exc.message}")
    http_exc = exc.to_http_exception()
    return JSONResponse(status_code=http_exc.status_code, content={"detail": http_exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=422, content={"detail": jsonable_encoder(exc.errors())})


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(auth_router)
app.include_router(owners_router)
app.include_router(pets_router)
app.include_router(photographers_router)
app.include_router(services_router)
app.include_router(bookings_router)
app.include_router(booking_services_router)
app.include_router(notifications_router)


@app.get("/")
async def root():
    return {"message": "Pet Photography Booking API", "status": "running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}
