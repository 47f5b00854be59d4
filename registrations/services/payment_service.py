import logging

import stripe
from django.conf import settings

logger = logging.getLogger(__name__)


class PaymentService:
    """Service class for payment provider integration (Stripe checkout, PayPal config)."""

    def __init__(self, api_key: str = None):
        self.api_key = api_key or settings.STRIPE_SECRET_KEY

    def create_checkout_session(self) -> str:
        """
        Create a Stripe Checkout session for the registration fee.

        Returns:
            str: the checkout session id, handed to the frontend for redirect

        Raises:
            stripe.StripeError: if Stripe rejects the request
        """
        session = stripe.checkout.Session.create(
            api_key=self.api_key,
            payment_method_types=["card"],
            mode="payment",
            line_items=[
                {
                    "price_data": {
                        "currency": settings.STRIPE_CURRENCY,
                        "product_data": {"name": settings.STRIPE_PRODUCT_NAME},
                        "unit_amount": settings.STRIPE_UNIT_AMOUNT,
                    },
                    "quantity": 1,
                }
            ],
            success_url=settings.STRIPE_SUCCESS_URL,
            cancel_url=settings.STRIPE_CANCEL_URL,
        )
        logger.info(f"Created Stripe checkout session {session.id}")
        return session.id

    def paypal_config(self) -> dict:
        return {"clientId": settings.PAYPAL_CLIENT_ID}
