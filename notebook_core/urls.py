# notebook_core/urls.py
from django.contrib import admin
from django.urls import path, include
from django.http import JsonResponse
from django.views.generic import RedirectView

from apps.notebook_accounts import views as account_views
from apps.notebook_youtube.views import youtube_summary_page


def ping(request):
    return JsonResponse({"status": "ok", "app": "notebook", "version": "dev"})


urlpatterns = [
    path("admin/", admin.site.urls),

    #  페이지
    path("login/", account_views.login_page, name="login"),
    path("login/submit/", account_views.login_action, name="login-submit"),
    path("signup/", account_views.signup_action, name="signup"),
    path("logout/", account_views.logout_action, name="logout"),
    path("dashboard/", include("apps.notebook_summaries.urls_dashboard")),
    path("youtube-summary/", youtube_summary_page, name="youtube-summary"),

    #  앱별 API
    path("api/auth/", include("apps.notebook_accounts.urls")),
    path("api/summaries/", include("apps.notebook_summaries.urls")),
    path("api/youtube-summary/", include("apps.notebook_youtube.urls")),

    #  홈/헬스체크
    path("", RedirectView.as_view(url="/dashboard/", permanent=False), name="home"),
    path("ping/", ping),
]
