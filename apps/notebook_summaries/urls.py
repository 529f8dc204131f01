from rest_framework.routers import SimpleRouter

from .views_api import SummaryViewSet

app_name = "notebook_summaries"

router = SimpleRouter(trailing_slash=True)
# /api/summaries/, /api/summaries/<id>/
router.register("", SummaryViewSet, basename="summary")

urlpatterns = router.urls
