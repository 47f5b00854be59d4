"""Errors raised by the registration workflows.

Each error carries the HTTP status the API layer answers with, so views can
translate any of them with a single ``except RegistrationError`` clause.
"""


class RegistrationError(Exception):
    status_code = 500
    default_message = "Internal Server Error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(RegistrationError):
    """A required field or the identity document is missing."""

    status_code = 400
    default_message = "All fields and file upload are required!"


class UploadRejected(RegistrationError):
    """The uploaded file has an unsupported type or exceeds the size limit."""

    status_code = 400
    default_message = "Only images (JPEG, JPG, PNG) and PDFs are allowed!"


class ConflictError(RegistrationError):
    """A registration with the same email already exists."""

    status_code = 400
    default_message = "User already registered"


class NotFoundError(RegistrationError):
    status_code = 404
    default_message = "User not found"
