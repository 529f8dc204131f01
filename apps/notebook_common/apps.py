from django.apps import AppConfig


class NotebookCommonConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.notebook_common"
    verbose_name = "Notebook Common"
