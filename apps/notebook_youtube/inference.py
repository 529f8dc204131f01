# apps/notebook_youtube/inference.py
import logging

import requests
from django.conf import settings

from apps.notebook_common.exceptions import UpstreamError
from apps.notebook_common.utils import get_credential

log = logging.getLogger(__name__)

API_KEY_NAME = "GEMINI_API_KEY"

YOUTUBE_SUMMARY_PROMPT = "영상의 내용을 아주 상세하고 꼼꼼하게 요약해줘."


def build_payload(prompt: str, url: str) -> dict:
    return {
        "contents": [
            {
                "parts": [
                    {"text": prompt},
                    {"file_data": {"file_uri": url}},
                ]
            }
        ]
    }


def extract_text(data):
    """candidates[0].content.parts[0].text, 없으면 None"""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text or None


class GeminiUrlClient:
    """
    Gemini generateContent REST 호출. 파일 업로드 없이 URL 을 그대로 넘기면
    Gemini 쪽에서 영상을 직접 읽는다.

    세션을 하나 쥐고 있으므로 with 블록으로 쓰거나 close() 를 부른다.
    timeout 기본값 None = 기다림 제한 없음 (GEMINI_HTTP_TIMEOUT 로 지정 가능).
    """

    def __init__(self, api_key: str, model: str = None, base_url: str = None, timeout=None, session=None):
        self.api_key = api_key
        self.model = model or settings.GEMINI_MODEL
        self.base_url = (base_url or settings.GEMINI_BASE_URL).rstrip("/")
        self.timeout = timeout
        self._session = session if session is not None else requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def close(self) -> None:
        self._session.close()

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    def _headers(self):
        return {
            "Content-Type": "application/json",
            "x-goog-api-key": self.api_key,
        }

    def generate_from_url(self, url: str, prompt: str) -> dict:
        r = self._session.post(
            self.endpoint,
            headers=self._headers(),
            json=build_payload(prompt, url),
            timeout=self.timeout,
        )

        # 2xx 만 성공
        if not 200 <= r.status_code < 300:
            log.warning("[Gemini] generateContent %s %s", r.status_code, r.reason)
            raise UpstreamError.from_response(r.status_code, r.reason or "", r.text)

        return r.json()


def build_url_client() -> GeminiUrlClient:
    """호출 시점에 키를 읽는다. 없으면 ConfigurationError."""
    api_key = get_credential(API_KEY_NAME, "GEMINI_API_KEY is not configured.")
    return GeminiUrlClient(api_key, timeout=getattr(settings, "GEMINI_HTTP_TIMEOUT", None))
