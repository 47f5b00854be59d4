from registrations.exceptions import ValidationError
from registrations.models import Registration

# Form field name -> Registration attribute
REQUIRED_FIELDS = {
    "firstName": "first_name",
    "lastName": "last_name",
    "email": "email",
    "gender": "gender",
    "phone": "phone",
    "country": "country",
    "state": "state",
    "city": "city",
    "address": "address",
    "idType": "id_type",
}


def validate_intake(data, uploaded_file) -> dict:
    """
    Check that every required form field is filled in and a file is attached.

    Args:
        data: submitted form fields (QueryDict or dict)
        uploaded_file: the attached identity document, or None

    Returns:
        dict: cleaned field values keyed by Registration attribute name

    Raises:
        ValidationError: if any field is missing or blank, the email is longer
            than the column allows, or no file was sent
    """
    cleaned = {}
    for form_field, attribute in REQUIRED_FIELDS.items():
        value = data.get(form_field)
        if isinstance(value, str):
            value = value.strip()
        if not value:
            raise ValidationError()
        cleaned[attribute] = value

    email_limit = Registration._meta.get_field("email").max_length
    if len(str(cleaned["email"])) > email_limit:
        raise ValidationError(f"Email must be at most {email_limit} characters")

    if not uploaded_file:
        raise ValidationError()

    return cleaned
