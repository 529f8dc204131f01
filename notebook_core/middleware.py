# notebook_core/middleware.py
from django.conf import settings


class NoStoreForDashboard:
    """
    대시보드 응답은 브라우저 캐시에 남기지 않는다.
    업로드/삭제 후 스크립트가 목록을 다시 받아올 때 항상 최신 목록이 오도록.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        res = self.get_response(request)
        prefix = getattr(settings, "DASHBOARD_URL_PREFIX", "/dashboard/")
        if request.path.startswith(prefix):
            res["Cache-Control"] = "no-store"
        return res
