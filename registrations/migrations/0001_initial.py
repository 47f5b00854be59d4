from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Registration",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True, primary_key=True, serialize=False, verbose_name="ID"
                    ),
                ),
                ("first_name", models.CharField(max_length=150)),
                ("last_name", models.CharField(max_length=150)),
                (
                    "email",
                    models.CharField(
                        help_text="Registrant email, matched exactly", max_length=254, unique=True
                    ),
                ),
                ("gender", models.CharField(max_length=50)),
                ("phone", models.CharField(max_length=50)),
                ("country", models.CharField(max_length=100)),
                ("state", models.CharField(max_length=100)),
                ("city", models.CharField(max_length=100)),
                ("address", models.CharField(max_length=500)),
                (
                    "id_type",
                    models.CharField(
                        help_text="Kind of identity document uploaded", max_length=100
                    ),
                ),
                (
                    "id_file_url",
                    models.CharField(
                        help_text="Relative path of the stored identity document", max_length=500
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("pending", "Pending"),
                            ("approved", "Approved"),
                            ("rejected", "Rejected"),
                        ],
                        db_index=True,
                        default="pending",
                        help_text="Current approval status",
                        max_length=20,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "verbose_name": "Registration",
                "verbose_name_plural": "Registrations",
                "db_table": "registrations",
                "ordering": ["-created_at"],
                "indexes": [
                    models.Index(fields=["status", "created_at"], name="registrations_status_idx")
                ],
            },
        ),
    ]
