from django.db import models


class Registration(models.Model):
    """Model representing one applicant's submitted details and approval status."""

    STATUS_PENDING = "pending"
    STATUS_APPROVED = "approved"
    STATUS_REJECTED = "rejected"

    STATUS_CHOICES = [
        (STATUS_PENDING, "Pending"),
        (STATUS_APPROVED, "Approved"),
        (STATUS_REJECTED, "Rejected"),
    ]

    first_name = models.TextField()
    last_name = models.TextField()
    email = models.CharField(
        max_length=254, unique=True, help_text="Registrant email, matched exactly"
    )
    gender = models.TextField()
    phone = models.TextField()
    country = models.TextField()
    state = models.TextField()
    city = models.TextField()
    address = models.TextField()
    id_type = models.TextField(help_text="Kind of identity document uploaded")
    id_file_url = models.CharField(
        max_length=500, help_text="Relative path of the stored identity document"
    )
    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=STATUS_PENDING,
        db_index=True,
        help_text="Current approval status",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "registrations"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["status", "created_at"], name="registrations_status_idx"),
        ]
        verbose_name = "Registration"
        verbose_name_plural = "Registrations"

    def __str__(self):
        return f"{self.first_name} {self.last_name} <{self.email}> ({self.status})"

    @property
    def is_approved(self):
        return self.status == self.STATUS_APPROVED
