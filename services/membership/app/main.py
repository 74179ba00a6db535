"""Entry point for the Membership service."""

import logging

from fastapi import FastAPI

from app.api import membership_router
from app.core.config import settings
from app.core.database import Base, engine
from app.core.error_handlers import register_exception_handlers

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)

Base.metadata.create_all(bind=engine)

app = FastAPI(title=settings.PROJECT_NAME)

register_exception_handlers(app)

app.include_router(
    membership_router,
    prefix="/api/v1",
)


__all__ = ["app"]
