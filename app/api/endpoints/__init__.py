from fastapi import APIRouter
from app.api.endpoints import athletes, auth, exercises, teams, workouts, upload, health

router = APIRouter()

router.include_router(athletes.router, prefix="/athletes", tags=["athletes"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
router.include_router(teams.router, prefix="/teams", tags=["teams"])
router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
router.include_router(upload.router, prefix="/upload", tags=["upload"])
router.include_router(health.router, prefix="/health", tags=["health"])
