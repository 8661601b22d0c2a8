# app/main.py
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from app.routes import employee_router, health_router
from app.database import connect_to_mongo, close_mongo_connection, init_db, insert_sample_data
from app.config import get_settings
from app.exceptions import EmployeeNotFoundError, InvalidPageRequestError, create_error_response
from app.logging_config import setup_logging

settings = get_settings()
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)
    app.state.database = connect_to_mongo(settings)
    await init_db(app.state.database)
    if settings.SEED_SAMPLE_DATA:
        await insert_sample_data(app.state.database)
    yield
    # Shutdown
    close_mongo_connection(app.state.database)

app = FastAPI(
    title="Employee API",
    description="Documentation Employee API v1.0.0",
    version="1.0.0",
    license_info={
        "name": "Apache License Version 2.0",
        "url": "https://www.apache.org/licenses/LICENSE-2.0",
    },
    lifespan=lifespan,
)

app.include_router(employee_router, prefix=settings.API_PREFIX, tags=["employees"])
app.include_router(health_router, tags=["health"])

@app.exception_handler(EmployeeNotFoundError)
async def employee_not_found_handler(request: Request, exc: EmployeeNotFoundError):
    logger.info("Employee not found: id=%s", exc.employee_id)
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content=create_error_response(
            message="Employee not found",
            details=exc.message,
            example="Please ensure you're using a valid employee ID",
        ),
    )

@app.exception_handler(InvalidPageRequestError)
async def invalid_page_request_handler(request: Request, exc: InvalidPageRequestError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=create_error_response(
            message="Invalid page request",
            details=exc.message,
            example="sort=name,desc",
        ),
    )

@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = []
    for error in exc.errors():
        # Drop the "body"/"query"/"path" prefix, keep the field path
        location = [str(part) for part in error.get("loc", ())]
        field = ".".join(location[1:]) or ".".join(location)
        errors.append({"field": field, "message": error.get("msg", "")})
    content = create_error_response(
        message="Validation failed",
        details="; ".join(f"{e['field']}: {e['message']}" for e in errors),
    )
    content["errors"] = errors
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)

@app.get("/")
async def root():
    return {"message": "Welcome to the Employee API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.RELOAD
    )
