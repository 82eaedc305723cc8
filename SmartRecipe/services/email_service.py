import os
from typing import Optional

from dotenv import load_dotenv
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import Mail

from SmartRecipe.logger import get_logger
from SmartRecipe.utils_time import format_datetime_ampm, get_local_time

load_dotenv()

SENDGRID_API_KEY = os.getenv("SENDGRID_API_KEY")
EMAIL_FROM = os.getenv("EMAIL_FROM", "noreply@smartrecipe.app")
TEST_EMAIL_CONTENT = "This is a test email from Smart Recipe Generator! 🍳"
TEST_EMAIL_TITLE = "Test Recipe"

logger = get_logger(__name__)


def build_review_email_content(
    review_content: str,
    recipe_title: str,
    reviewer_name: Optional[str] = None,
    rating: Optional[int] = None,
) -> str:
    """Plain-text review block with one star per rating point."""
    rating = rating if rating is not None else 0
    reviewer = reviewer_name if reviewer_name is not None else "Anonymous"
    stars = "★" * rating
    return (
        "🍳 Recipe Review\n"
        "\n"
        f"Recipe: {recipe_title}\n"
        f"Reviewer: {reviewer}\n"
        f"Rating: {stars} ({rating}/5)\n"
        "\n"
        "Review:\n"
        f"{review_content}\n"
        "\n"
        "---\n"
        "Generated by Smart Recipe Generator\n"
    )


class EmailService:
    """Sends plain-text emails through SendGrid."""

    def __init__(self, api_key: Optional[str] = None, sender: Optional[str] = None):
        self.api_key = api_key if api_key is not None else SENDGRID_API_KEY
        self.sender = sender or EMAIL_FROM

    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _send(self, to_email: str, subject: str, body: str) -> bool:
        if not self.is_configured():
            logger.warning("SendGrid API key is not configured; email not sent")
            return False

        message = Mail(
            from_email=self.sender,
            to_emails=to_email,
            subject=subject,
            plain_text_content=body
        )
        try:
            sg = SendGridAPIClient(self.api_key)
            response = sg.send(message)
        except Exception:
            logger.exception(f"Failed to send email to {to_email}")
            return False

        if 200 <= response.status_code < 300:
            logger.info(f"Email sent to {to_email} (Status: {response.status_code})")
            return True
        logger.error(f"SendGrid rejected email to {to_email} (Status: {response.status_code})")
        return False

    def send_recipe_email(self, to_email: str, recipe_content: str, recipe_title: str) -> bool:
        body = f"{recipe_content}\n\n---\nSent on {format_datetime_ampm(get_local_time())}"
        return self._send(to_email, f"🍳 Your Recipe: {recipe_title}", body)

    def send_review_email(
        self,
        to_email: str,
        review_content: str,
        recipe_title: str,
        reviewer_name: Optional[str] = None,
        rating: Optional[int] = None,
    ) -> bool:
        body = build_review_email_content(review_content, recipe_title, reviewer_name, rating)
        return self._send(to_email, f"Review for: {recipe_title}", body)

    def send_test_email(self, to_email: str) -> bool:
        return self.send_recipe_email(to_email, TEST_EMAIL_CONTENT, TEST_EMAIL_TITLE)
