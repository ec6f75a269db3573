from django.apps import AppConfig


class StudyGuidesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "studyguides"
