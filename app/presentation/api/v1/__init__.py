from fastapi import APIRouter

from app.presentation.api.v1 import github

router = APIRouter()
router.include_router(github.router, prefix="/github", tags=["github"])
