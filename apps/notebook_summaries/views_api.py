# apps/notebook_summaries/views_api.py
from rest_framework import mixins, permissions, status, viewsets
from rest_framework.response import Response

from . import views
from .serializers import SummarySerializer, UploadSerializer
from .services import delete_summary, upload_and_summarize
from .store import SummaryStore


class SummaryViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet,
):
    """
    /api/summaries/

    GET    /api/summaries/         내 요약 목록 (최신순)
    POST   /api/summaries/         multipart "file" 업로드 → 요약 생성
    GET    /api/summaries/<id>/    요약 전문
    DELETE /api/summaries/<id>/    삭제

    수정(PUT/PATCH)은 없다. 요약은 만든 뒤 바뀌지 않는다.
    """
    serializer_class = SummarySerializer
    permission_classes = [permissions.IsAuthenticated]

    def get_queryset(self):
        return SummaryStore(self.request.user).list()

    def create(self, request, *args, **kwargs):
        ser = UploadSerializer(data=request.data)
        ser.is_valid(raise_exception=True)

        result = upload_and_summarize(
            request.user,
            ser.validated_data.get("file"),
            client_factory=views.file_client_factory,
        )
        if not result.success:
            return Response(result.to_dict(), status=result.status)

        record = SummaryStore(request.user).get(result.data["id"])
        return Response(
            {"success": True, "data": SummarySerializer(record).data},
            status=status.HTTP_201_CREATED,
        )

    def destroy(self, request, *args, **kwargs):
        self.get_object()
        delete_summary(request.user, kwargs["pk"])
        return Response(status=status.HTTP_204_NO_CONTENT)
