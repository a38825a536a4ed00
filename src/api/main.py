from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from ..core.logging import setup_logging
from ..core.config import settings
from .routers import cashflow, health, invoice

logger = setup_logging()
app = FastAPI(title="Cashflow Invoice Backend")


# Add custom exception handler for validation errors
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.error(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())},
    )


# Configure CORS to allow frontend access
# CORS_ORIGINS can be set in .env as comma-separated list
# Example: CORS_ORIGINS=http://localhost:3000,https://your-frontend.com
allowed_origins = [origin.strip() for origin in settings.cors_origins.split(",")]

app.add_middleware(
    CORSMiddleware,
    allow_origins=allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(invoice.router)
app.include_router(cashflow.router)
