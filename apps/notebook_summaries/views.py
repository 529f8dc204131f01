# apps/notebook_summaries/views.py
from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.http import Http404, JsonResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_POST

from apps.notebook_accounts.gateway import AuthGateway
from apps.notebook_common.exceptions import AuthorizationError

from .inference import build_file_client
from .models import Summary
from .services import delete_summary, upload_and_summarize
from .store import SummaryStore

# 테스트에서 교체할 수 있게 모듈 수준에 둔다
file_client_factory = build_file_client


def _list_context(store: SummaryStore):
    return {
        "summaries": store.list(),
        "preview_chars": settings.SUMMARY_PREVIEW_CHARS,
    }


@require_GET
def dashboard(request):
    user = AuthGateway(request).get_current_user()
    if user is None:
        return redirect("/login/")
    return render(request, "notebook_summaries/dashboard.html", _list_context(SummaryStore(user)))


@login_required
@require_GET
def summary_list_fragment(request):
    """업로드/삭제 후 페이지 스크립트가 다시 받아가는 카드 목록."""
    return render(request, "notebook_summaries/_summary_list.html", _list_context(SummaryStore(request.user)))


@login_required
@require_GET
def summary_detail(request, summary_id):
    try:
        summary = SummaryStore(request.user).get(summary_id)
    except Summary.DoesNotExist:
        raise Http404("Summary not found")
    return render(request, "notebook_summaries/detail.html", {"summary": summary})


@require_POST
def upload(request):
    user = AuthGateway(request).get_current_user()
    result = upload_and_summarize(
        user,
        request.FILES.get("file"),
        client_factory=file_client_factory,
    )
    return JsonResponse(result.to_dict(), status=result.status)


@require_POST
def delete(request, summary_id):
    user = AuthGateway(request).get_current_user()
    try:
        delete_summary(user, summary_id)
    except AuthorizationError as e:
        return JsonResponse({"success": False, "error": e.message}, status=401)
    return JsonResponse({"success": True})
