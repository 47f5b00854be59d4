import logging

from django.conf import settings
from django.core.mail import EmailMessage

logger = logging.getLogger(__name__)

ORGANIZATION_NAME = "Kings Health Care Practitioner Limited"


class ContactService:
    """Service class for the public contact form."""

    def __init__(self, connection=None, receivers=None):
        self.connection = connection
        self.receivers = receivers if receivers is not None else settings.CONTACT_RECEIVER_EMAILS

    def send(self, name: str, email: str, message: str) -> None:
        """
        Forward a contact form submission and acknowledge it to the sender.

        Unlike registration notifications, a failed send propagates to the caller.

        Args:
            name: sender's name
            email: sender's email, used for Reply-To and the acknowledgment
            message: free text from the form
        """
        if self.receivers:
            EmailMessage(
                subject="New Contact Form Submission",
                body=(
                    "You have received a new message from:\n\n"
                    f"Name: {name}\n"
                    f"Email: {email}\n"
                    f"Message: {message}"
                ),
                from_email=settings.DEFAULT_FROM_EMAIL,
                to=self.receivers,
                reply_to=[email],
                connection=self.connection,
            ).send()
            logger.info(f"Contact form from {email} forwarded to {len(self.receivers)} receivers")
        else:
            logger.warning(f"No contact receivers configured, not forwarding message from {email}")

        EmailMessage(
            subject="Your Submission Was Received!",
            body=(
                f"Hello {name},\n\n"
                "Thank you for contacting us. We have received your message "
                "and will get back to you soon.\n\n"
                "Best regards,\n"
                f"{ORGANIZATION_NAME}"
            ),
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[email],
            connection=self.connection,
        ).send()
        logger.info(f"Contact acknowledgment sent to {email}")
