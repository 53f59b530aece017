from fastapi import APIRouter

from review_widget.routers import reviews

api_router = APIRouter()

api_router.include_router(reviews.router)
