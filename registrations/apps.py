from django.apps import AppConfig


class RegistrationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "registrations"

    def ready(self):
        """Register system checks for the app's external credentials."""
        import registrations.checks  # noqa
