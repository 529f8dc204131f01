from django.apps import AppConfig


class NotebookYoutubeConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.notebook_youtube"
    verbose_name = "Notebook YouTube Summary"
