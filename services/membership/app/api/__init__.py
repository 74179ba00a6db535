from app.api.v1 import router as membership_router

__all__ = ["membership_router"]
