from fastapi import APIRouter

from app.quantum.routers.auth import router as auth_router
from app.quantum.routers.categories import router as categories_router
from app.quantum.routers.chatbot import router as chatbot_router
from app.quantum.routers.health import router as health_router
from app.quantum.routers.orders import router as orders_router
from app.quantum.routers.products import router as products_router
from app.quantum.routers.reviews import router as reviews_router
from app.quantum.routers.users import router as users_router
from app.quantum.schemas.errors import ApiErrorResponse

ERROR_RESPONSES = {
    401: {"model": ApiErrorResponse},
    403: {"model": ApiErrorResponse},
    404: {"model": ApiErrorResponse},
    409: {"model": ApiErrorResponse},
    422: {"model": ApiErrorResponse},
}

api_router = APIRouter()
api_router.include_router(health_router)
api_router.include_router(auth_router, prefix="/quantum", tags=["auth"], responses=ERROR_RESPONSES)
api_router.include_router(products_router, prefix="/quantum", tags=["products"], responses=ERROR_RESPONSES)
api_router.include_router(categories_router, prefix="/quantum", tags=["categories"], responses=ERROR_RESPONSES)
api_router.include_router(users_router, prefix="/quantum", tags=["users"], responses=ERROR_RESPONSES)
api_router.include_router(orders_router, prefix="/quantum", tags=["orders"], responses=ERROR_RESPONSES)
api_router.include_router(reviews_router, prefix="/quantum", tags=["reviews"], responses=ERROR_RESPONSES)
api_router.include_router(chatbot_router, prefix="/quantum", tags=["chatbot"], responses=ERROR_RESPONSES)
