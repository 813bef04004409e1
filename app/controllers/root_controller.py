from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["Root"])

WELCOME_MESSAGE = "Welcome to the Product API! Go to /api/products to see all products."


@router.get("/", response_class=PlainTextResponse)
async def root():
    return WELCOME_MESSAGE
