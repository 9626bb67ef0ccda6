from fastapi import APIRouter

from src.classroom.api.v1 import assignments

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(assignments.router)
