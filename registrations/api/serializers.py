from rest_framework import serializers
from registrations.models import Registration


class RegistrationSerializer(serializers.ModelSerializer):
    """Serializer for Registration records as returned by the API."""

    firstName = serializers.CharField(source="first_name", read_only=True)
    lastName = serializers.CharField(source="last_name", read_only=True)
    idType = serializers.CharField(source="id_type", read_only=True)
    idFileUrl = serializers.CharField(source="id_file_url", read_only=True)
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)
    updatedAt = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Registration
        fields = [
            "id",
            "firstName",
            "lastName",
            "email",
            "gender",
            "phone",
            "country",
            "state",
            "city",
            "address",
            "idType",
            "idFileUrl",
            "status",
            "createdAt",
            "updatedAt",
        ]


class StatusUpdateSerializer(serializers.Serializer):
    """Input for POST /users/update-status."""

    userId = serializers.CharField()
    status = serializers.CharField()


class ContactSerializer(serializers.Serializer):
    """Input for POST /send-email."""

    name = serializers.CharField()
    email = serializers.EmailField()
    message = serializers.CharField()
