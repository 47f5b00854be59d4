import logging

from django.conf import settings
from django.http import HttpResponse
from django.views.static import serve
from rest_framework.views import APIView
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework import status
from registrations.api.serializers import (
    ContactSerializer,
    RegistrationSerializer,
    StatusUpdateSerializer,
)
from registrations.exceptions import RegistrationError
from registrations.services.contact_service import ContactService
from registrations.services.payment_service import PaymentService
from registrations.services.registration_service import RegistrationService

logger = logging.getLogger(__name__)


def api_root(request):
    return HttpResponse("API is running....", content_type="text/plain")


def serve_upload(request, path):
    """
    Serve a stored identity document.

    GET /uploads/{filename}
    """
    return serve(request, path, document_root=settings.MEDIA_ROOT)


class RegisterView(APIView):
    """
    API endpoint to register a new applicant.

    POST /register

    Multipart form fields:
        firstName, lastName, email, gender, phone, country, state, city,
        address, idType and the identity document as file field ``idFile``
        (JPEG, JPG, PNG or PDF, at most 5 MB).

    Response (201):
    {
        "message": "Registration successful. Await approval.",
        "data": {"id": 1, "firstName": "Ada", ..., "status": "pending"}
    }
    """

    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def post(self, request):
        """Register a new applicant."""
        data = request.data
        uploaded_file = request.FILES.get("idFile")

        try:
            service = RegistrationService()
            registration = service.register(data, uploaded_file)
        except RegistrationError as e:
            return Response({"error": e.message}, status=e.status_code)
        except Exception as e:
            logger.error(f"Error registering {data.get('email')}: {str(e)}")
            return Response(
                {"error": "Internal Server Error", "details": str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {
                "message": "Registration successful. Await approval.",
                "data": RegistrationSerializer(registration).data,
            },
            status=status.HTTP_201_CREATED,
        )


class RegistrationListView(APIView):
    """
    API endpoint to list every registration.

    GET /users
    """

    def get(self, request):
        """Get all registrations."""
        try:
            registrations = RegistrationService().list_registrations()
        except Exception as e:
            logger.error(f"Error fetching registrations: {str(e)}")
            return Response(
                {"error": "Failed to fetch users"}, status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response(
            RegistrationSerializer(registrations, many=True).data, status=status.HTTP_200_OK
        )


class UpdateStatusView(APIView):
    """
    API endpoint to approve or reject a registration.

    POST /users/update-status

    Request body:
    {
        "userId": "1",
        "status": "approved"
    }
    """

    def post(self, request):
        """Update a registration's status and email the registrant."""
        serializer = StatusUpdateSerializer(data=request.data)

        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user_id = serializer.validated_data["userId"]
        new_status = serializer.validated_data["status"]

        try:
            RegistrationService().update_status(user_id, new_status)
        except RegistrationError as e:
            return Response({"error": e.message}, status=e.status_code)
        except Exception as e:
            logger.error(f"Error updating status of registration {user_id}: {str(e)}")
            return Response(
                {"error": "Error updating user status"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {"message": f"User status updated to {new_status}"}, status=status.HTTP_200_OK
        )


class RegistrationDeleteView(APIView):
    """
    API endpoint to delete a registration and its identity document.

    DELETE /users/{user_id}
    """

    def delete(self, request, user_id):
        """Delete registration and stored file."""
        try:
            RegistrationService().delete_registration(user_id)
        except RegistrationError as e:
            return Response({"message": e.message}, status=e.status_code)
        except Exception as e:
            logger.error(f"Error deleting registration {user_id}: {str(e)}")
            return Response(
                {"message": "Server Error", "error": str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response({"message": "User deleted successfully"}, status=status.HTTP_200_OK)


class ContactEmailView(APIView):
    """
    API endpoint for the contact form.

    POST /send-email

    Request body:
    {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "message": "Hello"
    }
    """

    def post(self, request):
        """Forward a contact message and acknowledge it."""
        serializer = ContactSerializer(data=request.data)

        if not serializer.is_valid():
            return Response(
                {"success": False, "message": "Name, a valid email and message are required"},
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            ContactService().send(**serializer.validated_data)
        except Exception as e:
            logger.error(f"Error sending email: {str(e)}")
            return Response(
                {"success": False, "message": "Failed to send email"},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )

        return Response(
            {"success": True, "message": "Emails sent successfully!"}, status=status.HTTP_200_OK
        )


class CheckoutSessionView(APIView):
    """
    API endpoint to start a Stripe Checkout payment.

    POST /create-checkout-session

    Response:
    {
        "id": "cs_test_..."
    }
    """

    def post(self, request):
        """Create a checkout session."""
        try:
            session_id = PaymentService().create_checkout_session()
        except Exception as e:
            logger.error(f"Error creating checkout session: {str(e)}")
            return Response({"error": str(e)}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"id": session_id}, status=status.HTTP_200_OK)


class PaypalConfigView(APIView):
    """
    API endpoint exposing the public PayPal client id.

    GET /api/config/paypal
    """

    def get(self, request):
        return Response(PaymentService().paypal_config(), status=status.HTTP_200_OK)
