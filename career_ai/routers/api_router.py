from fastapi import APIRouter
from career_ai.routers import cover_letters, dashboard, interview, resume

# Centralized API router hub: main.py only imports this single hub.
api_router = APIRouter()

api_router.include_router(cover_letters.router, tags=["Cover Letters"])
api_router.include_router(dashboard.router, tags=["Industry Insights"])
api_router.include_router(interview.router, tags=["Interview Prep"])
api_router.include_router(resume.router, tags=["Resume"])
