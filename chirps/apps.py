from django.apps import AppConfig


class ChirpsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "chirps"

    def ready(self):
        """Connect model lifecycle signals and event listeners."""
        # Import signals and listeners to register them
        import chirps.listeners  # noqa: PLC0415, F401
        import chirps.signals  # noqa: PLC0415, F401
