"""Notification email delivery through Resend"""
from typing import Optional
import html
import logging

import httpx

from app.config import Settings
from app.models.forms import FormSubmission

logger = logging.getLogger(__name__)

RESEND_API_URL = "https://api.resend.com/emails"


def build_subject(submission: FormSubmission) -> str:
    return f"New Project Inquiry from {submission.name}"


def build_html_body(submission: FormSubmission) -> str:
    """Render the inquiry as HTML, escaping every user-supplied field"""
    name = html.escape(submission.name)
    email = html.escape(submission.email)
    details = html.escape(submission.details).replace("\n", "<br>")

    return f"""
        <h1>New Project Inquiry</h1>
        <p><strong>Name:</strong> {name}</p>
        <p><strong>Email:</strong> <a href="mailto:{email}">{email}</a></p>
        <h3>Project Details:</h3>
        <p>{details}</p>
        """


class EmailDispatcher:
    """Sends one notification email per submission; never raises"""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    def build_payload(self, submission: FormSubmission) -> dict:
        return {
            "from": f"{self.settings.from_name} <{self.settings.from_email}>",
            "to": [self.settings.to_email],
            "subject": build_subject(submission),
            "reply_to": submission.email,
            "html": build_html_body(submission)
        }

    async def send(self, submission: FormSubmission) -> bool:
        """
        Send the inquiry notification via Resend

        Args:
            submission: Validated form submission

        Returns:
            True if Resend accepted the message
        """
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    RESEND_API_URL,
                    headers={
                        "Authorization": f"Bearer {self.settings.resend_api_key}",
                        "Content-Type": "application/json"
                    },
                    json=self.build_payload(submission)
                )

            if response.is_success:
                logger.info(f"Inquiry email sent for {submission.name}: {response.text}")
                return True

            logger.error(f"Resend rejected inquiry email: {response.status_code} - {response.text}")
            return False

        except Exception as e:
            logger.error(f"Inquiry email error: {e}")
            return False
