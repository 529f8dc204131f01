from django.conf import settings
from django.db import models


class Summary(models.Model):
    owner = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="summaries",
    )
    file_name = models.CharField(max_length=255)
    file_type = models.CharField(max_length=255, blank=True)
    summary_text = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["owner", "-created_at"], name="summary_owner_created_idx"),
        ]

    def __str__(self):
        return self.file_name
