import logging

from fastapi import FastAPI, status
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.routers import forms
from app.services.form_session import VALIDATION_STRATEGIES
from app.utils.response import create_response, handle_exception

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=settings.PROJECT_NAME)

# CORS for SPA / API access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add routes
app.include_router(forms.router)


@app.get("/")
def home():
    try:
        return create_response(
            message="Registration Forms API running",
            data={"service": "registration-forms"},
            status_code=status.HTTP_200_OK
        )
    except Exception as exc:
        return handle_exception(exc)


@app.get("/api-info")
def api_info():
    try:
        return create_response(
            message="API information",
            data={
                "service": settings.PROJECT_NAME,
                "docs_url": "/docs",
                "strategies": list(VALIDATION_STRATEGIES),
            },
            status_code=status.HTTP_200_OK
        )
    except Exception as exc:
        return handle_exception(exc)
