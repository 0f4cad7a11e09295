import time
import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from dotenv import load_dotenv
import os

# Load env vars
load_dotenv()

from backend.routes import staff
from backend.db import init_roster, close_roster
from backend.services.salary import SalaryEngineError
from backend.utils.logging_config import setup_logging

# Configure logging (file + console) on import
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
setup_logging(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: a roster that cannot be loaded is fatal
    try:
        roster = init_roster(app)
    except Exception:
        logger.exception("Failed to load roster")
        raise
    logger.info("Application started with %d staff", len(roster))
    yield
    # Shutdown
    close_roster(app)
    logger.info("Application shutdown")


from fastapi.middleware.cors import CORSMiddleware

app = FastAPI(title="Staff Salary Service", lifespan=lifespan)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log every HTTP request: method, path, status, duration."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "%s %s %s %.2fms",
        request.method,
        request.url.path,
        response.status_code,
        duration_ms,
    )
    return response


@app.exception_handler(SalaryEngineError)
async def salary_engine_error_handler(request: Request, exc: SalaryEngineError):
    """Corrupt roster (cycle, runaway depth): not retryable, report as server error."""
    logger.error("Salary computation failed for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": str(exc)})


# CORS Configuration
origins = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include Routers
@app.get("/")
async def root():
    return {"message": "Staff Salary API is running"}

app.include_router(staff.router)
