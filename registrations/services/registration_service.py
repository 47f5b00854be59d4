import logging

from registrations.exceptions import ConflictError, NotFoundError, ValidationError
from registrations.models import Registration
from registrations.notifications import Notifier
from registrations.store import RegistrationStore
from registrations.uploads import UploadPolicy
from registrations.validators import validate_intake

logger = logging.getLogger(__name__)

VALID_STATUSES = {choice for choice, _ in Registration.STATUS_CHOICES}


class RegistrationService:
    """Service class for registration intake, review and cleanup operations."""

    def __init__(self, store=None, upload_policy=None, notifier=None):
        self.store = store or RegistrationStore()
        self.upload_policy = upload_policy or UploadPolicy()
        self.notifier = notifier or Notifier()

    def register(self, data, uploaded_file) -> Registration:
        """
        Register a new applicant from a submitted form and identity document.

        Steps:
        1. Screen the attached file (type and size)
        2. Check every required field and the file are present
        3. Reject emails that already have a registration
        4. Store the file and create the record with status pending
        5. Notify the registrant and the administrator

        Args:
            data: submitted form fields
            uploaded_file: the attached identity document, or None

        Returns:
            Registration: the newly created record

        Raises:
            UploadRejected: unsupported file type or file too large
            ValidationError: missing field or file
            ConflictError: email already registered
        """
        if uploaded_file:
            logger.info(
                f"Received upload {uploaded_file.name!r} "
                f"({uploaded_file.content_type}, {uploaded_file.size} bytes)"
            )
            self.upload_policy.screen(uploaded_file)

        fields = validate_intake(data, uploaded_file)

        if self.store.find_by_email(fields["email"]):
            raise ConflictError()

        fields["id_file_url"] = self.upload_policy.store(uploaded_file)
        try:
            registration = self.store.create(fields)
        except Exception:
            # No stored file outlives a failed insert, including a lost race on email
            self.upload_policy.delete(fields["id_file_url"])
            raise

        self.notifier.registration_received(registration)
        self.notifier.new_registration_alert(registration)

        return registration

    def update_status(self, registration_id, status: str) -> Registration:
        """
        Change a registration's status and tell the registrant.

        Any status may follow any other; only the value itself is checked.

        Raises:
            ValidationError: if status is not a known value
            NotFoundError: if no registration has this id
        """
        if status not in VALID_STATUSES:
            raise ValidationError(
                f"Invalid status '{status}'. Allowed: {', '.join(sorted(VALID_STATUSES))}"
            )

        registration = self.store.update_status(registration_id, status)
        self.notifier.status_changed(registration)
        return registration

    def list_registrations(self):
        return self.store.list_all()

    def delete_registration(self, registration_id) -> Registration:
        """
        Delete a registration together with its stored identity document.

        The file goes first; a file that is already missing is not an error.
        The two steps are not atomic: if the record deletion fails the file
        stays deleted.

        Raises:
            NotFoundError: if no registration has this id
        """
        registration = self.store.find_by_id(registration_id)
        if not registration:
            raise NotFoundError()

        if registration.id_file_url:
            self.upload_policy.delete(registration.id_file_url)

        return self.store.delete_by_id(registration.pk)
