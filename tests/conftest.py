"""
Pytest configuration and shared fixtures for the test suite.
"""

import pytest
from unittest.mock import Mock
from django.core.files.storage import default_storage
from django.core.files.base import ContentFile
from django.core.files.uploadedfile import SimpleUploadedFile
from registrations.models import Registration

PDF_BYTES = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\ntrailer<<>>\n%%EOF\n"
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture(autouse=True)
def upload_dir(settings, tmp_path):
    """Point MEDIA_ROOT at a per-test directory so stored files never leak between tests."""
    media_root = tmp_path / "uploads"
    media_root.mkdir()
    settings.MEDIA_ROOT = str(media_root)
    return media_root


@pytest.fixture
def sample_registration_data():
    """Form fields for a complete registration."""
    return {
        "firstName": "Ada",
        "lastName": "Okafor",
        "email": "ada.okafor@example.com",
        "gender": "female",
        "phone": "+2348012345678",
        "country": "Nigeria",
        "state": "Lagos",
        "city": "Ikeja",
        "address": "12 Allen Avenue",
        "idType": "passport",
    }


@pytest.fixture
def make_upload():
    """Factory fixture for in-memory identity document uploads."""

    def _make_upload(name="passport.pdf", content_type="application/pdf", content=None, size=None):
        if content is None:
            content = PNG_BYTES if name.lower().endswith(".png") else PDF_BYTES
        if size is not None:
            content = content[:size].ljust(size, b"0")
        return SimpleUploadedFile(name, content, content_type=content_type)

    return _make_upload


@pytest.fixture
def create_registration(db):
    """Factory fixture to create a registration, optionally with a stored file."""

    def _create_registration(with_file=True, **kwargs):
        data = {
            "first_name": "Ada",
            "last_name": "Okafor",
            "email": "ada.okafor@example.com",
            "gender": "female",
            "phone": "+2348012345678",
            "country": "Nigeria",
            "state": "Lagos",
            "city": "Ikeja",
            "address": "12 Allen Avenue",
            "id_type": "passport",
            "id_file_url": "/uploads/idFile-1700000000000-123456789.pdf",
        }
        data.update(kwargs)
        if with_file:
            name = default_storage.save(
                data["id_file_url"].rsplit("/", 1)[-1], ContentFile(PDF_BYTES)
            )
            data["id_file_url"] = f"/uploads/{name}"
        return Registration.objects.create(**data)

    return _create_registration


@pytest.fixture
def mock_notifier():
    """Notifier stand-in recording calls without sending mail."""
    notifier = Mock()
    notifier.registration_received.return_value = True
    notifier.new_registration_alert.return_value = True
    notifier.status_changed.return_value = True
    return notifier


@pytest.fixture
def mock_stripe_session(mocker):
    """Mock Stripe Checkout session creation."""
    session = Mock()
    session.id = "cs_test_a1b2c3"
    return mocker.patch(
        "registrations.services.payment_service.stripe.checkout.Session.create",
        return_value=session,
    )
