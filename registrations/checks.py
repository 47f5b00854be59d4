"""
System checks for credentials the registration service reads from the environment.

Missing values are reported as warnings: the process still starts, and the
affected feature fails (or is skipped) when first used.
"""

from django.conf import settings
from django.core.checks import Warning, register


@register()
def check_mail_settings(app_configs, **kwargs):
    errors = []
    if not settings.EMAIL_HOST_USER or not settings.EMAIL_HOST_PASSWORD:
        errors.append(
            Warning(
                "Mail account credentials are not configured.",
                hint="Set EMAIL_USER and EMAIL_PASS; notification emails will fail to send.",
                id="registrations.W001",
            )
        )
    if not settings.ADMIN_EMAIL:
        errors.append(
            Warning(
                "ADMIN_EMAIL is not configured.",
                hint="New registration alerts will not be sent.",
                id="registrations.W002",
            )
        )
    if not settings.CONTACT_RECEIVER_EMAILS:
        errors.append(
            Warning(
                "No contact form receivers configured.",
                hint="Set RECEIVER_EMAIL_1 and/or RECEIVER_EMAIL_2.",
                id="registrations.W003",
            )
        )
    return errors


@register()
def check_payment_settings(app_configs, **kwargs):
    errors = []
    if not settings.STRIPE_SECRET_KEY:
        errors.append(
            Warning(
                "STRIPE_SECRET_KEY is not configured.",
                hint="Checkout session creation will fail.",
                id="registrations.W004",
            )
        )
    if not settings.PAYPAL_CLIENT_ID:
        errors.append(
            Warning(
                "PAYPAL_CLIENT_ID is not configured.",
                id="registrations.W005",
            )
        )
    return errors
