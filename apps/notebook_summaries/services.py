# apps/notebook_summaries/services.py
from __future__ import annotations

import logging
import os
import shutil
import tempfile

from django.conf import settings

from apps.notebook_common.exceptions import AuthorizationError, InputError, NotebookError
from apps.notebook_common.utils import ActionResult

from .inference import FILE_SUMMARY_PROMPT, build_file_client
from .store import SummaryStore

log = logging.getLogger(__name__)


def _scratch_path(upload_name: str, scratch_root: str | None) -> tuple[str, str]:
    """작업마다 고유한 임시 디렉터리 안에 원래 파일 이름으로 경로를 만든다."""
    root = scratch_root or getattr(settings, "SCRATCH_DIR", None) or None
    if root:
        os.makedirs(root, exist_ok=True)
    scratch_dir = tempfile.mkdtemp(prefix="upload-", dir=root)
    name = os.path.basename((upload_name or "").replace("\\", "/")) or "upload"
    return scratch_dir, os.path.join(scratch_dir, name)


def _write_scratch(upload, path: str) -> None:
    with open(path, "wb") as fp:
        for chunk in upload.chunks():
            fp.write(chunk)


def upload_and_summarize(
    user,
    upload,
    *,
    store: SummaryStore | None = None,
    client_factory=build_file_client,
    scratch_root: str | None = None,
) -> ActionResult:
    """
    파일 1개를 Gemini 로 요약해서 저장한다.

    1) 로그인 확인 2) API 키 확인 3) 임시 파일 저장 4) Gemini 업로드
    5) 요약 생성 6) DB 저장 7) 임시 파일 삭제

    실패하면 처음 만난 오류 메시지를 담아 ActionResult(success=False) 를 돌려준다.
    6) 까지 성공했을 때만 임시 파일을 지운다.
    목록 갱신은 호출한 쪽이 다시 조회한다.
    """
    try:
        if user is None or not user.is_authenticated:
            raise AuthorizationError("Unauthorized.")

        client = client_factory()
        with client:
            if not upload:
                raise InputError("No file uploaded.")

            file_name = upload.name
            file_type = getattr(upload, "content_type", "") or ""

            scratch_dir, scratch_path = _scratch_path(file_name, scratch_root)
            _write_scratch(upload, scratch_path)

            ref = client.upload_file(scratch_path, mime_type=file_type, display_name=file_name)
            summary_text = client.generate(ref, FILE_SUMMARY_PROMPT)

        store = store or SummaryStore(user)
        record = store.insert(file_name=file_name, file_type=file_type, summary_text=summary_text)

        shutil.rmtree(scratch_dir)

        log.info("[upload] summary saved: id=%s user=%s file=%s", record.id, user.pk, file_name)
        return ActionResult.ok({"id": record.id})

    except NotebookError as e:
        log.warning("[upload] %s: %s", type(e).__name__, e.message)
        return ActionResult.fail(e.message, status=e.status_code)
    except Exception as e:
        log.exception("[upload] 처리 중 오류")
        return ActionResult.fail(str(e) or "Something went wrong.", status=500)


def delete_summary(user, summary_id, *, store: SummaryStore | None = None) -> int:
    """
    본인 요약 1개 삭제. 저장소 오류는 변환하지 않고 그대로 올린다.
    """
    if user is None or not user.is_authenticated:
        raise AuthorizationError("Unauthorized.")
    store = store or SummaryStore(user)
    deleted = store.delete(summary_id)
    log.info("[delete] summary id=%s user=%s deleted=%s", summary_id, user.pk, deleted)
    return deleted
