import logging

from django.db import IntegrityError, transaction

from registrations.exceptions import ConflictError, NotFoundError
from registrations.models import Registration

logger = logging.getLogger(__name__)


class RegistrationStore:
    """Persistence for registration records, one per email."""

    model = Registration

    def find_by_email(self, email: str):
        return self.model.objects.filter(email=email).first()

    def find_by_id(self, registration_id):
        """Look up a record by primary key; malformed ids resolve to None."""
        try:
            return self.model.objects.filter(pk=registration_id).first()
        except (TypeError, ValueError):
            return None

    def create(self, fields: dict) -> Registration:
        """
        Persist a new record with status pending.

        The unique constraint on email is the real duplicate guard; a lookup
        done earlier by the caller only gives a faster error.

        Raises:
            ConflictError: if a record with the same email already exists
        """
        try:
            with transaction.atomic():
                registration = self.model.objects.create(
                    status=Registration.STATUS_PENDING, **fields
                )
        except IntegrityError as e:
            logger.warning(f"Duplicate registration rejected for {fields.get('email')}: {str(e)}")
            raise ConflictError() from e

        logger.info(f"Created registration {registration.pk} for {registration.email}")
        return registration

    def update_status(self, registration_id, status: str) -> Registration:
        registration = self.find_by_id(registration_id)
        if not registration:
            raise NotFoundError()

        registration.status = status
        registration.save(update_fields=["status", "updated_at"])
        logger.info(f"Registration {registration.pk} status set to {status}")
        return registration

    def list_all(self):
        return list(self.model.objects.all())

    def delete_by_id(self, registration_id) -> Registration:
        """
        Delete a record and hand it back so the caller can clean up its file.

        Raises:
            NotFoundError: if no record has this id
        """
        registration = self.find_by_id(registration_id)
        if not registration:
            raise NotFoundError()

        deleted_pk = registration.pk
        registration.delete()
        # delete() clears the pk on the instance
        registration.pk = deleted_pk
        logger.info(f"Deleted registration {deleted_pk}")
        return registration
