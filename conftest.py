import pytest
from django.contrib.auth import get_user_model
from rest_framework.test import APIClient

from apps.notebook_common.exceptions import InferenceError
from apps.notebook_summaries.inference import UploadedFileRef


@pytest.fixture(autouse=True)
def _isolated_credentials(monkeypatch, tmp_path, settings):
    # 개발자 .env / 환경변수의 실제 키가 테스트로 새지 않도록
    monkeypatch.delenv("GOOGLE_GENERATIVE_AI_API_KEY", raising=False)
    monkeypatch.delenv("GEMINI_API_KEY", raising=False)
    settings.SCRATCH_DIR = str(tmp_path / "scratch")


@pytest.fixture
def user(db):
    return get_user_model().objects.create_user(username="u@example.com", email="u@example.com", password="pw-123456")


@pytest.fixture
def other_user(db):
    return get_user_model().objects.create_user(username="o@example.com", email="o@example.com", password="pw-123456")


@pytest.fixture
def auth_client(client, user):
    client.force_login(user)
    return client


@pytest.fixture
def api_client(user):
    c = APIClient()
    c.force_authenticate(user=user)
    return c


class FakeFileClient:
    """GeminiFileClient 대역. 올라온 파일 내용과 프롬프트를 기록한다."""

    def __init__(self, text="Summary text", upload_error=None, generate_error=None):
        self.text = text
        self.upload_error = upload_error
        self.generate_error = generate_error
        self.uploads = []
        self.prompts = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False

    def close(self):
        self.closed = True

    def upload_file(self, path, mime_type, display_name):
        with open(path, "rb") as fp:
            content = fp.read()
        self.uploads.append(
            {"path": path, "mime_type": mime_type, "display_name": display_name, "content": content}
        )
        if self.upload_error:
            raise self.upload_error
        return UploadedFileRef(uri="https://generativelanguage.googleapis.com/v1beta/files/abc123", mime_type=mime_type)

    def generate(self, ref, prompt):
        self.prompts.append((ref, prompt))
        if self.generate_error:
            raise self.generate_error
        if not self.text:
            raise InferenceError("No summary generated.")
        return self.text


@pytest.fixture
def fake_file_client():
    return FakeFileClient()


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text="", reason="OK"):
        self.status_code = status_code
        self._json = json_data
        self.text = text
        self.reason = reason

    @property
    def ok(self):
        return 200 <= self.status_code < 300

    def json(self):
        return self._json


class FakeSession:
    """requests.Session 대역. post 호출 인자를 기록한다."""

    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.calls = []
        self.closed = False

    def post(self, url, **kwargs):
        self.calls.append({"url": url, **kwargs})
        if self.error:
            raise self.error
        return self.response

    def close(self):
        self.closed = True
