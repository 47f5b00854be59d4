import logging

from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.template.loader import render_to_string
from django.utils.html import strip_tags

logger = logging.getLogger(__name__)

TEMPLATE_DIR = "registrations/emails"


class Notifier:
    """
    Sends the templated registration emails.

    Delivery is best-effort: a failed send is logged and reported through the
    return value, never raised, so the operation that triggered it keeps its
    own outcome.
    """

    def __init__(self, connection=None, admin_email: str = None, review_url: str = None):
        self.connection = connection
        self.admin_email = admin_email if admin_email is not None else settings.ADMIN_EMAIL
        self.review_url = review_url or settings.ADMIN_REVIEW_URL

    def registration_received(self, registration) -> bool:
        """Confirm to the registrant that their submission arrived."""
        return self._send(
            registration.email,
            "Training Registration Received",
            "registration_received.html",
            {"registration": registration},
        )

    def new_registration_alert(self, registration) -> bool:
        """Tell the administrator a registration is waiting for review."""
        if not self.admin_email:
            logger.warning(
                f"ADMIN_EMAIL not configured, skipping alert for registration {registration.pk}"
            )
            return False

        return self._send(
            self.admin_email,
            "New User Registration",
            "new_registration_alert.html",
            {"registration": registration, "review_url": self.review_url},
        )

    def status_changed(self, registration) -> bool:
        return self._send(
            registration.email,
            f"Your Registration has been {registration.status}",
            "status_changed.html",
            {"registration": registration},
        )

    def _send(self, to: str, subject: str, template: str, context: dict) -> bool:
        try:
            html_content = render_to_string(f"{TEMPLATE_DIR}/{template}", context)
            message = EmailMultiAlternatives(
                subject=subject,
                body=strip_tags(html_content).strip(),
                from_email=settings.DEFAULT_FROM_EMAIL,
                to=[to],
                connection=self.connection,
            )
            message.attach_alternative(html_content, "text/html")
            message.send()
            logger.info(f"Email sent to {to}: {subject}")
            return True
        except Exception as e:
            logger.error(f"Error sending email to {to}: {str(e)}")
            return False
