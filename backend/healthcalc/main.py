"""
FastAPI application entry point.
"""

import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from healthcalc.api.responses import register_exception_handlers
from healthcalc.api.v1 import auth, bmi, tdee, users
from healthcalc.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    description="BMI and TDEE calculators with per-user history, statistics and trends",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)


def custom_openapi():
    """Custom OpenAPI schema with security schemes."""
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    openapi_schema.setdefault("components", {})["securitySchemes"] = {
        "Bearer": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
            "description": "Enter your JWT token. Get it from /api/v1/auth/login endpoint.",
        }
    }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi

register_exception_handlers(app)

app.include_router(auth.router, prefix="/api/v1/auth", tags=["auth"])
app.include_router(users.router, prefix="/api/v1/users", tags=["users"])
app.include_router(bmi.router, prefix="/api/v1/bmi", tags=["bmi"])
app.include_router(tdee.router, prefix="/api/v1/tdee", tags=["tdee"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {"success": True, "message": settings.app_name, "version": app.version}


@app.get("/health")
def health():
    """Health check endpoint."""
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("healthcalc.main:app", host="0.0.0.0", port=8000)
