from django.urls import path
from registrations.api.views import (
    api_root,
    serve_upload,
    RegisterView,
    RegistrationListView,
    UpdateStatusView,
    RegistrationDeleteView,
    ContactEmailView,
    CheckoutSessionView,
    PaypalConfigView,
)

urlpatterns = [
    path("", api_root, name="api-root"),
    path("register", RegisterView.as_view(), name="register"),
    # Registration review endpoints
    path("users", RegistrationListView.as_view(), name="users-list"),
    path("users/update-status", UpdateStatusView.as_view(), name="users-update-status"),
    path("users/<str:user_id>", RegistrationDeleteView.as_view(), name="users-delete"),
    path("uploads/<path:path>", serve_upload, name="uploads"),
    # Contact form
    path("send-email", ContactEmailView.as_view(), name="send-email"),
    # Payments
    path(
        "create-checkout-session", CheckoutSessionView.as_view(), name="create-checkout-session"
    ),
    path("api/config/paypal", PaypalConfigView.as_view(), name="paypal-config"),
]
