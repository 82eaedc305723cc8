from fastapi import HTTPException, Query
from pydantic import EmailStr

from SmartRecipe.logger import get_logger
from SmartRecipe.routers.base import api_router
from SmartRecipe.schemas.email import EmailRequest
from SmartRecipe.schemas.recipe import ApiResponse
from SmartRecipe.schemas.review import ReviewEmailRequest
from SmartRecipe.services.email_service import EmailService

logger = get_logger(__name__)


@api_router.post("/recipes/send-email", response_model=ApiResponse)
def send_recipe_email(request: EmailRequest):
    logger.info(f"Sending recipe email to: {request.email}")
    sent = EmailService().send_recipe_email(request.email, request.recipe_content, request.recipe_title)
    if not sent:
        raise HTTPException(status_code=500, detail="Failed to send email")
    return ApiResponse(status=True, message=f"Recipe sent successfully to {request.email}")


@api_router.post("/recipes/reviews/send-email", response_model=ApiResponse)
def send_review_email(request: ReviewEmailRequest):
    logger.info(f"Sending review email to: {request.email}")
    sent = EmailService().send_review_email(
        request.email,
        request.review_content,
        request.recipe_title,
        request.reviewer_name,
        request.rating
    )
    if not sent:
        raise HTTPException(status_code=500, detail="Failed to send email")
    return ApiResponse(status=True, message=f"Review sent successfully to {request.email}")


@api_router.post("/recipes/test-email", response_model=ApiResponse)
def send_test_email(email: EmailStr = Query(..., description="Recipient address")):
    logger.info(f"Testing email service with: {email}")
    if not EmailService().send_test_email(email):
        raise HTTPException(status_code=500, detail="Failed to send test email")
    return ApiResponse(status=True, message=f"Test email sent successfully to {email}")
