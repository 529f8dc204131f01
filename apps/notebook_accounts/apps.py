from django.apps import AppConfig


class NotebookAccountsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.notebook_accounts"
    verbose_name = "Notebook Accounts"
