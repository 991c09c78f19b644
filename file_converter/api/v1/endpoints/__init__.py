from fastapi import APIRouter
from .page import router as page_router
from .convert import router as convert_router

router = APIRouter()
router.include_router(page_router)
router.include_router(convert_router)
