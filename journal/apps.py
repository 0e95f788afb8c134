from django.apps import AppConfig


class JournalConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "journal"

    def ready(self):
        # An inconsistent roadmap stops start-up (ScheduleInvariantViolation).
        from .blueprint import get_roadmap
        get_roadmap()
