# apps/notebook_youtube/views.py
from django.shortcuts import render
from django.views.decorators.http import require_http_methods
from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from .inference import build_url_client
from .serializers import YoutubeSummaryRequestSerializer
from .services import summarize_youtube_video

# 테스트에서 교체할 수 있게 모듈 수준에 둔다
url_client_factory = build_url_client


@require_http_methods(["GET", "POST"])
def youtube_summary_page(request):
    """
    GET  빈 폼
    POST 요약 결과 또는 오류를 같은 페이지에 그린다 (저장 안 함, 새로고침하면 사라짐)
    """
    context = {"url": "", "summary": "", "error": ""}
    if request.method == "POST":
        url = request.POST.get("url", "")
        result = summarize_youtube_video(url, client_factory=url_client_factory)
        context["url"] = url
        if result.success:
            context["summary"] = result.data
        else:
            context["error"] = result.error or "요약에 실패했습니다."
    return render(request, "notebook_youtube/summary.html", context)


class YoutubeSummaryAPI(APIView):
    """
    POST /api/youtube-summary/

    body:
      - url: str

    response:
      {"success": true, "data": "..."} | {"success": false, "error": "..."}
    """
    permission_classes = [permissions.AllowAny]

    def post(self, request):
        ser = YoutubeSummaryRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        result = summarize_youtube_video(ser.validated_data["url"], client_factory=url_client_factory)
        return Response(result.to_dict(), status=result.status)
