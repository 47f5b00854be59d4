"""
Unit tests for RegistrationService and RegistrationStore.
"""

import pytest
from django.db import DataError
from registrations.exceptions import (
    ConflictError,
    NotFoundError,
    UploadRejected,
    ValidationError,
)
from registrations.models import Registration
from registrations.services.registration_service import RegistrationService
from registrations.store import RegistrationStore
from registrations.validators import validate_intake


class TestIntakeValidation:
    """Test cases for required field checks."""

    def test_valid_submission(self, sample_registration_data, make_upload):
        cleaned = validate_intake(sample_registration_data, make_upload())

        assert cleaned["first_name"] == "Ada"
        assert cleaned["id_type"] == "passport"
        assert "idType" not in cleaned

    @pytest.mark.parametrize("missing", ["firstName", "email", "idType", "address"])
    def test_missing_field(self, sample_registration_data, make_upload, missing):
        del sample_registration_data[missing]

        with pytest.raises(ValidationError) as exc_info:
            validate_intake(sample_registration_data, make_upload())

        assert exc_info.value.message == "All fields and file upload are required!"

    def test_blank_field_counts_as_missing(self, sample_registration_data, make_upload):
        sample_registration_data["city"] = "   "

        with pytest.raises(ValidationError):
            validate_intake(sample_registration_data, make_upload())

    def test_missing_file(self, sample_registration_data):
        with pytest.raises(ValidationError):
            validate_intake(sample_registration_data, None)

    def test_long_free_text_is_accepted(self, sample_registration_data, make_upload):
        sample_registration_data["address"] = "Plot 7, " * 100

        cleaned = validate_intake(sample_registration_data, make_upload())

        assert len(cleaned["address"]) > 500

    def test_overlong_email(self, sample_registration_data, make_upload):
        sample_registration_data["email"] = "a" * 250 + "@example.com"

        with pytest.raises(ValidationError) as exc_info:
            validate_intake(sample_registration_data, make_upload())

        assert "at most 254" in exc_info.value.message


@pytest.mark.django_db
class TestRegistrationStore:
    """Test cases for registration persistence."""

    def setup_method(self):
        self.store = RegistrationStore()

    def test_create_defaults_to_pending(self, create_registration):
        registration = create_registration(with_file=False)

        assert registration.status == Registration.STATUS_PENDING
        assert registration.created_at is not None
        assert registration.updated_at is not None

    def test_create_duplicate_email_raises_conflict(self, create_registration):
        existing = create_registration(with_file=False)
        fields = {
            "first_name": "Other",
            "last_name": "Person",
            "email": existing.email,
            "gender": "male",
            "phone": "1",
            "country": "Ghana",
            "state": "Accra",
            "city": "Accra",
            "address": "1 Road",
            "id_type": "license",
            "id_file_url": "/uploads/idFile-1.pdf",
        }

        with pytest.raises(ConflictError):
            self.store.create(fields)

        assert Registration.objects.filter(email=existing.email).count() == 1

    def test_find_by_email_is_exact_match(self, create_registration):
        create_registration(with_file=False)

        assert self.store.find_by_email("ada.okafor@example.com") is not None
        assert self.store.find_by_email("someone@example.com") is None

    def test_find_by_id_with_malformed_id(self):
        assert self.store.find_by_id("not-a-number") is None

    def test_update_status_unknown_id(self):
        with pytest.raises(NotFoundError):
            self.store.update_status(999999, Registration.STATUS_APPROVED)

    def test_list_all_empty(self):
        assert self.store.list_all() == []

    def test_delete_returns_deleted_record(self, create_registration):
        registration = create_registration(with_file=False)

        deleted = self.store.delete_by_id(registration.pk)

        assert deleted.pk == registration.pk
        assert deleted.id_file_url == registration.id_file_url
        assert not Registration.objects.filter(pk=registration.pk).exists()


@pytest.mark.django_db
class TestRegistrationServiceRegister:
    """Test cases for the registration intake workflow."""

    def test_register_success(self, sample_registration_data, make_upload, mock_notifier, upload_dir):
        service = RegistrationService(notifier=mock_notifier)

        registration = service.register(sample_registration_data, make_upload())

        assert registration.status == "pending"
        assert registration.email == sample_registration_data["email"]
        assert registration.id_file_url.startswith("/uploads/idFile-")
        assert len(list(upload_dir.iterdir())) == 1
        mock_notifier.registration_received.assert_called_once_with(registration)
        mock_notifier.new_registration_alert.assert_called_once_with(registration)

    def test_register_duplicate_email(
        self, sample_registration_data, make_upload, mock_notifier, create_registration, upload_dir
    ):
        create_registration(with_file=False, email=sample_registration_data["email"])
        service = RegistrationService(notifier=mock_notifier)

        with pytest.raises(ConflictError):
            service.register(sample_registration_data, make_upload())

        assert Registration.objects.count() == 1
        assert list(upload_dir.iterdir()) == []
        mock_notifier.registration_received.assert_not_called()

    def test_register_rejected_upload_creates_nothing(
        self, sample_registration_data, make_upload, mock_notifier, upload_dir
    ):
        service = RegistrationService(notifier=mock_notifier)

        with pytest.raises(UploadRejected):
            service.register(
                sample_registration_data, make_upload(size=6 * 1024 * 1024)
            )

        assert Registration.objects.count() == 0
        assert list(upload_dir.iterdir()) == []
        mock_notifier.new_registration_alert.assert_not_called()

    def test_register_missing_field_creates_nothing(
        self, sample_registration_data, make_upload, mock_notifier, upload_dir
    ):
        del sample_registration_data["phone"]
        service = RegistrationService(notifier=mock_notifier)

        with pytest.raises(ValidationError):
            service.register(sample_registration_data, make_upload())

        assert Registration.objects.count() == 0
        assert list(upload_dir.iterdir()) == []

    def test_register_lost_race_removes_stored_file(
        self, sample_registration_data, make_upload, mock_notifier, create_registration, upload_dir
    ):
        """A duplicate that slips past the pre-check is stopped by the unique constraint."""
        create_registration(with_file=False, email=sample_registration_data["email"])
        store = RegistrationStore()
        store.find_by_email = lambda email: None
        service = RegistrationService(store=store, notifier=mock_notifier)

        with pytest.raises(ConflictError):
            service.register(sample_registration_data, make_upload())

        assert Registration.objects.count() == 1
        assert list(upload_dir.iterdir()) == []

    def test_register_failed_insert_removes_stored_file(
        self, mocker, sample_registration_data, make_upload, mock_notifier, upload_dir
    ):
        """Any insert failure, not only a duplicate, cleans up the stored document."""
        mocker.patch.object(
            RegistrationStore,
            "create",
            side_effect=DataError("value too long for type character varying(500)"),
        )
        service = RegistrationService(notifier=mock_notifier)

        with pytest.raises(DataError):
            service.register(sample_registration_data, make_upload())

        assert Registration.objects.count() == 0
        assert list(upload_dir.iterdir()) == []
        mock_notifier.registration_received.assert_not_called()


@pytest.mark.django_db
class TestRegistrationServiceReview:
    """Test cases for status updates, listing and deletion."""

    def test_update_status_notifies_registrant(self, create_registration, mock_notifier):
        registration = create_registration()
        service = RegistrationService(notifier=mock_notifier)

        updated = service.update_status(registration.pk, "approved")

        assert updated.status == "approved"
        registration.refresh_from_db()
        assert registration.status == "approved"
        mock_notifier.status_changed.assert_called_once_with(updated)

    def test_update_status_allows_any_transition(self, create_registration, mock_notifier):
        registration = create_registration(status="rejected")
        service = RegistrationService(notifier=mock_notifier)

        service.update_status(registration.pk, "approved")
        service.update_status(registration.pk, "pending")

        registration.refresh_from_db()
        assert registration.status == "pending"

    def test_update_status_unknown_id_sends_nothing(self, mock_notifier):
        service = RegistrationService(notifier=mock_notifier)

        with pytest.raises(NotFoundError):
            service.update_status("424242", "approved")

        mock_notifier.status_changed.assert_not_called()

    def test_update_status_invalid_value(self, create_registration, mock_notifier):
        registration = create_registration()
        service = RegistrationService(notifier=mock_notifier)

        with pytest.raises(ValidationError):
            service.update_status(registration.pk, "archived")

        registration.refresh_from_db()
        assert registration.status == "pending"
        mock_notifier.status_changed.assert_not_called()

    def test_list_registrations(self, create_registration, mock_notifier):
        create_registration(with_file=False, email="first@example.com")
        create_registration(with_file=False, email="second@example.com")

        registrations = RegistrationService(notifier=mock_notifier).list_registrations()

        assert {r.email for r in registrations} == {"first@example.com", "second@example.com"}

    def test_delete_removes_record_and_file(self, create_registration, mock_notifier, upload_dir):
        registration = create_registration()
        assert len(list(upload_dir.iterdir())) == 1

        RegistrationService(notifier=mock_notifier).delete_registration(registration.pk)

        assert not Registration.objects.filter(pk=registration.pk).exists()
        assert list(upload_dir.iterdir()) == []

    def test_delete_with_file_already_gone(self, create_registration, mock_notifier):
        registration = create_registration(with_file=False)

        RegistrationService(notifier=mock_notifier).delete_registration(registration.pk)

        assert not Registration.objects.filter(pk=registration.pk).exists()

    def test_delete_unknown_id(self, mock_notifier):
        with pytest.raises(NotFoundError):
            RegistrationService(notifier=mock_notifier).delete_registration(999)
