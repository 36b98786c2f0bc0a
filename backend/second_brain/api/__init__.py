"""API routes"""
from fastapi import APIRouter
from .v1 import auth, content, brain

api_router = APIRouter()

# Register routes
api_router.include_router(auth.router, tags=["auth"])
api_router.include_router(content.router, prefix="/content", tags=["content"])
api_router.include_router(brain.router, prefix="/brain", tags=["brain"])
