# apps/notebook_youtube/services.py
import logging

from apps.notebook_common.exceptions import InferenceError, InputError, NotebookError
from apps.notebook_common.utils import ActionResult

from .inference import YOUTUBE_SUMMARY_PROMPT, build_url_client, extract_text

log = logging.getLogger(__name__)


def summarize_youtube_video(url: str, *, client_factory=build_url_client) -> ActionResult:
    """
    YouTube URL 을 Gemini 에 바로 넘겨 요약을 받는다. 로그인 불필요, 저장하지 않음.

    성공: ActionResult(success=True, data=<요약 텍스트>)
    실패: ActionResult(success=False, error=<메시지>)
    """
    try:
        client = client_factory()
        with client:
            url = (url or "").strip()
            if not url:
                raise InputError("URL is required.")

            data = client.generate_from_url(url, YOUTUBE_SUMMARY_PROMPT)

        summary = extract_text(data)
        if not summary:
            raise InferenceError("No summary generated.")

        return ActionResult.ok(summary)

    except NotebookError as e:
        log.warning("[youtube] %s: %s", type(e).__name__, e.message)
        return ActionResult.fail(e.message, status=e.status_code)
    except Exception as e:
        log.exception("[youtube] 요약 중 오류")
        return ActionResult.fail(str(e) or "An unexpected error occurred.", status=500)
