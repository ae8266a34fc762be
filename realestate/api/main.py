"""
FastAPI app assembly: logging, middleware, error handling and router wiring.
"""
import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from realestate.api.categories import router as categories_router
from realestate.api.customers import router as customers_router
from realestate.api.invoices import router as invoices_router
from realestate.api.locations import router as locations_router
from realestate.api.properties import router as properties_router

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="Real Estate Management Service",
    description="API for managing customers, properties, categories, locations and invoices.",
    version="1.0.0",
)

_DEFAULT_ORIGINS = "http://localhost,http://localhost:3000,http://localhost:8000"
origins = [o.strip() for o in os.getenv("CORS_ORIGINS", _DEFAULT_ORIGINS).split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    # Business-rule failures are handled in the routers; anything reaching
    # here is a store or programming error.
    logger.exception("unhandled_error: %s %s", request.method, request.url.path)
    return JSONResponse({"detail": "An unexpected error occurred."}, status_code=500)


app.include_router(customers_router)
app.include_router(categories_router)
app.include_router(locations_router)
app.include_router(properties_router)
app.include_router(invoices_router)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "realestate-service"}
