# apps/notebook_summaries/store.py
import logging

from django.db import DatabaseError

from apps.notebook_common.exceptions import StoreError

from .models import Summary

log = logging.getLogger(__name__)


class SummaryStore:
    """
    요약 레코드 저장소. 모든 조회/삭제는 owner 로 범위가 묶인다.

    DB 커넥션은 Django 가 관리하므로 이 객체는 따로 닫을 자원이 없다.
    """

    def __init__(self, owner):
        self.owner = owner

    def _scoped(self):
        return Summary.objects.filter(owner=self.owner)

    def insert(self, file_name: str, file_type: str, summary_text: str) -> Summary:
        try:
            return Summary.objects.create(
                owner=self.owner,
                file_name=file_name,
                file_type=file_type or "",
                summary_text=summary_text,
            )
        except DatabaseError as e:
            log.error("[SummaryStore] insert 실패: %s", e)
            raise StoreError(str(e) or "Failed to save summary.") from e

    def delete(self, summary_id) -> int:
        """다른 사용자의 id 이거나 없는 id 면 아무 일도 없이 0 을 돌려준다."""
        try:
            deleted, _ = self._scoped().filter(id=summary_id).delete()
        except DatabaseError as e:
            log.error("[SummaryStore] delete 실패 (id=%s): %s", summary_id, e)
            raise StoreError(str(e) or "Failed to delete summary.") from e
        return deleted

    def list(self):
        return self._scoped().order_by("-created_at", "-id")

    def get(self, summary_id) -> Summary:
        return self._scoped().get(id=summary_id)
