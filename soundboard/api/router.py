from fastapi import APIRouter

from soundboard.api.endpoints import soundboards, history, profile, feedback, report

api_router = APIRouter()

api_router.include_router(soundboards.router, prefix="/soundboards", tags=["soundboards"])
api_router.include_router(history.router, prefix="/history", tags=["history"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(feedback.router, prefix="/feedback", tags=["feedback"])
api_router.include_router(report.router, prefix="/report", tags=["report"])
