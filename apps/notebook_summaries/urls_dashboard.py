from django.urls import path

from . import views

urlpatterns = [
    path("", views.dashboard, name="dashboard"),
    path("upload/", views.upload, name="dashboard-upload"),
    path("summaries/", views.summary_list_fragment, name="dashboard-summaries"),
    path("summaries/<int:summary_id>/", views.summary_detail, name="dashboard-summary-detail"),
    path("summaries/<int:summary_id>/delete/", views.delete, name="dashboard-summary-delete"),
]
