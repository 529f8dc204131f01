from django.apps import AppConfig


class NotebookSummariesConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.notebook_summaries"
    verbose_name = "Notebook Summaries"
