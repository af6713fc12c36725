# Copyright 2025 Antimortine
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import time
from contextlib import asynccontextmanager

from catalog.core.config import settings
from catalog.core.database import MongoDatabase

# Set up logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Import the main API router
from catalog.api.v1.api import api_router
from catalog.api.deps import INTERNAL_ERROR


# --- Lifespan Event Handler ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Lifespan: Starting up Game Catalog API...")
    database = MongoDatabase(settings)
    try:
        database.connect()
    except Exception as e:
        logger.critical(f"Lifespan: Error trying to connect to the database: {e}", exc_info=True)
        raise
    app.state.database = database
    logger.info("Lifespan: Startup complete.")

    yield # The application runs while yielded

    logger.info("Lifespan: Shutting down Game Catalog API...")
    database.close()
    app.state.database = None
    logger.info("Lifespan: Shutdown complete.")


# --- FastAPI App Initialization ---
app = FastAPI(title=settings.PROJECT_NAME, lifespan=lifespan)


# --- Request Logging Middleware ---
@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()
    logger.info(f"MIDDLEWARE: Incoming request: {request.method} {request.url.path}")
    try:
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.info(f"MIDDLEWARE: Finished request: {request.method} {request.url.path} - Status: {response.status_code} - Time: {process_time:.4f}s")
        return response
    except Exception as e:
        process_time = time.time() - start_time
        logger.error(f"MIDDLEWARE: Exception during request: {request.method} {request.url.path} - Error: {e} - Time: {process_time:.4f}s", exc_info=True)
        raise e

# --- Exception Handlers ---
# Every error body has the shape {"message": "..."}

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=getattr(exc, "headers", None))

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    logger.warning(f"Request validation failed for {request.method} {request.url.path}: {errors}")
    loc = errors[0].get("loc", ()) if errors else ()
    # loc is ("body", "<field>", ...) for a field error, ("body",) for the body itself
    if len(loc) > 1:
        message = f'Invalid value for field "{loc[1]}"'
    else:
        message = "Invalid request body"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"GLOBAL HANDLER: Unhandled exception for {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": INTERNAL_ERROR}
    )

# --- CORS Middleware ---
app.add_middleware(CORSMiddleware, allow_origins=settings.CORS_ORIGINS, allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

# --- Root Endpoint / Health Check ---
@app.get("/")
async def read_root():
    logger.debug("Root endpoint handler called!")
    return {"message": "Welcome to Game Catalog API!"}

# --- Include API Routers ---
app.include_router(api_router, prefix=settings.API_V1_STR)
