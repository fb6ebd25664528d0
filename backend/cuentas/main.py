"""
Cuentas - account management API for the medical records platform.
Create, read, update and cascade-delete accounts; credential validation.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import settings
from .core.logging_config import configure_logging
from .models.base import Base, engine
from . import models  # noqa: F401  Ensure all tables are registered
from .api import auth, cuentas
from .seed_demo import seed_demo_data

configure_logging()

# Create all database tables
# NOTE: In production, use Alembic migrations instead of create_all()
Base.metadata.create_all(bind=engine)

if settings.SEED_DEMO_DATA:
    seed_demo_data()

app = FastAPI(
    title="Cuentas API",
    description="User accounts, roles and credentials for the medical records platform.",
    version=settings.VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # TODO: Restrict to the frontend origin once it has a fixed host
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth.router, prefix="/api/v1")
app.include_router(cuentas.router, prefix="/api/v1")


@app.get("/health")
def health_check():
    return {"status": "healthy", "service": settings.APP_NAME, "version": settings.VERSION}
