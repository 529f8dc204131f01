from django.urls import path

from .views import YoutubeSummaryAPI

app_name = "notebook_youtube"

urlpatterns = [
    # /api/youtube-summary/
    path("", YoutubeSummaryAPI.as_view(), name="youtube-summary-api"),
]
