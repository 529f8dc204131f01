# apps/notebook_summaries/inference.py
import logging
from dataclasses import dataclass

from django.conf import settings
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from apps.notebook_common.exceptions import InferenceError, UpstreamError
from apps.notebook_common.utils import get_credential

log = logging.getLogger(__name__)

API_KEY_NAME = "GOOGLE_GENERATIVE_AI_API_KEY"

FILE_SUMMARY_PROMPT = (
    "Summarize this file in detail. "
    "Provide key points and a structured summary using markdown."
)


@dataclass(frozen=True)
class UploadedFileRef:
    uri: str
    mime_type: str


def _upstream(e: "genai_errors.APIError") -> UpstreamError:
    code = getattr(e, "code", None)
    status_text = getattr(e, "status", None) or ""
    body = getattr(e, "message", None) or str(e)
    return UpstreamError.from_response(code, status_text, body)


class GeminiFileClient:
    """
    Gemini Files API 로 파일을 올리고, 그 파일 참조로 generateContent 를 호출한다.

    with 블록 안에서 쓰거나 끝나면 close() 를 부른다.
    올린 원격 파일은 지우지 않는다 (Gemini 쪽에서 48시간 후 만료).
    """

    def __init__(self, api_key: str, model: str = None, client=None):
        self.model = model or settings.GEMINI_MODEL
        self._client = client if client is not None else genai.Client(api_key=api_key)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def close(self) -> None:
        self._client = None

    def _sdk(self):
        if self._client is None:
            raise RuntimeError("GeminiFileClient is closed")
        return self._client

    def upload_file(self, path: str, mime_type: str, display_name: str) -> UploadedFileRef:
        config = types.UploadFileConfig(
            mime_type=mime_type or None,
            display_name=display_name,
        )
        try:
            uploaded = self._sdk().files.upload(file=path, config=config)
        except genai_errors.APIError as e:
            log.warning("[Gemini] file upload 실패: %s", e)
            raise _upstream(e) from e

        log.info("[Gemini] uploaded %s -> %s", display_name, uploaded.uri)
        return UploadedFileRef(uri=uploaded.uri, mime_type=uploaded.mime_type or mime_type)

    def generate(self, ref: UploadedFileRef, prompt: str) -> str:
        contents = [
            types.Part.from_uri(file_uri=ref.uri, mime_type=ref.mime_type),
            prompt,
        ]
        try:
            response = self._sdk().models.generate_content(model=self.model, contents=contents)
        except genai_errors.APIError as e:
            log.warning("[Gemini] generate_content 실패: %s", e)
            raise _upstream(e) from e

        text = response.text
        if not text or not text.strip():
            raise InferenceError("No summary generated.")
        return text


def build_file_client() -> GeminiFileClient:
    """호출 시점에 키를 읽는다. 없으면 ConfigurationError."""
    api_key = get_credential(API_KEY_NAME, "Gemini API Key is missing.")
    return GeminiFileClient(api_key)
