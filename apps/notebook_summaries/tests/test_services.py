import os

import pytest
from django.contrib.auth.models import AnonymousUser
from django.core.files.uploadedfile import SimpleUploadedFile

from apps.notebook_common.exceptions import StoreError, UpstreamError
from apps.notebook_summaries.inference import FILE_SUMMARY_PROMPT, build_file_client
from apps.notebook_summaries.models import Summary
from apps.notebook_summaries.services import delete_summary, upload_and_summarize
from apps.notebook_summaries.store import SummaryStore

from conftest import FakeFileClient


def _pdf(name="notes.pdf", content=b"%PDF-1.4 fake", content_type="application/pdf"):
    return SimpleUploadedFile(name, content, content_type=content_type)


class BrokenStore(SummaryStore):
    def insert(self, file_name, file_type, summary_text):
        raise StoreError("insert failed")


@pytest.mark.django_db
def test_upload_creates_one_record(user, fake_file_client, tmp_path):
    result = upload_and_summarize(user, _pdf(), client_factory=lambda: fake_file_client, scratch_root=str(tmp_path))

    assert result.success is True
    rows = list(Summary.objects.filter(owner=user))
    assert len(rows) == 1
    assert rows[0].file_name == "notes.pdf"
    assert rows[0].file_type == "application/pdf"
    assert rows[0].summary_text == "Summary text"
    assert result.to_dict() == {"success": True, "data": {"id": rows[0].id}}


@pytest.mark.django_db
def test_upload_sends_file_and_fixed_prompt(user, fake_file_client, tmp_path):
    upload_and_summarize(user, _pdf(), client_factory=lambda: fake_file_client, scratch_root=str(tmp_path))

    sent = fake_file_client.uploads[0]
    assert sent["content"] == b"%PDF-1.4 fake"
    assert sent["mime_type"] == "application/pdf"
    assert sent["display_name"] == "notes.pdf"
    ref, prompt = fake_file_client.prompts[0]
    assert prompt == FILE_SUMMARY_PROMPT
    assert ref.uri.endswith("/files/abc123")
    assert fake_file_client.closed


@pytest.mark.django_db
def test_upload_removes_scratch_file_on_success(user, fake_file_client, tmp_path):
    upload_and_summarize(user, _pdf(), client_factory=lambda: fake_file_client, scratch_root=str(tmp_path))

    path = fake_file_client.uploads[0]["path"]
    assert not os.path.exists(path)
    assert os.listdir(tmp_path) == []


@pytest.mark.django_db
def test_upload_requires_user(fake_file_client):
    calls = []

    def factory():
        calls.append(1)
        return fake_file_client

    result = upload_and_summarize(AnonymousUser(), _pdf(), client_factory=factory)

    assert result.to_dict() == {"success": False, "error": "Unauthorized."}
    assert result.status == 401
    assert calls == []
    assert Summary.objects.count() == 0


@pytest.mark.django_db
def test_upload_without_api_key_creates_nothing(user):
    result = upload_and_summarize(user, _pdf(), client_factory=build_file_client)

    assert result.success is False
    assert result.error == "Gemini API Key is missing."
    assert Summary.objects.count() == 0


@pytest.mark.django_db
def test_upload_without_file(user, fake_file_client):
    result = upload_and_summarize(user, None, client_factory=lambda: fake_file_client)

    assert result.error == "No file uploaded."
    assert result.status == 400
    assert fake_file_client.uploads == []


@pytest.mark.django_db
def test_store_failure_keeps_scratch_file_and_reports_error(user, fake_file_client, tmp_path):
    result = upload_and_summarize(
        user,
        _pdf(),
        store=BrokenStore(user),
        client_factory=lambda: fake_file_client,
        scratch_root=str(tmp_path),
    )

    assert result.to_dict() == {"success": False, "error": "insert failed"}
    assert Summary.objects.count() == 0
    # 정리 단계는 건너뛴다
    assert os.path.exists(fake_file_client.uploads[0]["path"])


@pytest.mark.django_db
def test_empty_generation_is_an_inference_error(user, tmp_path):
    client = FakeFileClient(text="")

    result = upload_and_summarize(user, _pdf(), client_factory=lambda: client, scratch_root=str(tmp_path))

    assert result.error == "No summary generated."
    assert Summary.objects.count() == 0


@pytest.mark.django_db
def test_upstream_error_is_surfaced_verbatim(user, tmp_path):
    err = UpstreamError.from_response(403, "PERMISSION_DENIED", "API key not valid")
    client = FakeFileClient(upload_error=err)

    result = upload_and_summarize(user, _pdf(), client_factory=lambda: client, scratch_root=str(tmp_path))

    assert result.error == "API Error: 403 PERMISSION_DENIED - API key not valid"
    assert result.status == 502
    assert client.prompts == []


@pytest.mark.django_db
def test_unexpected_error_is_reduced_to_message(user, tmp_path):
    client = FakeFileClient(generate_error=ValueError("boom"))

    result = upload_and_summarize(user, _pdf(), client_factory=lambda: client, scratch_root=str(tmp_path))

    assert result.to_dict() == {"success": False, "error": "boom"}
    assert result.status == 500


@pytest.mark.django_db
def test_same_file_name_gets_separate_scratch_paths(user, tmp_path):
    first = FakeFileClient(upload_error=RuntimeError("stop"))
    second = FakeFileClient(upload_error=RuntimeError("stop"))

    upload_and_summarize(user, _pdf(content=b"one"), client_factory=lambda: first, scratch_root=str(tmp_path))
    upload_and_summarize(user, _pdf(content=b"two"), client_factory=lambda: second, scratch_root=str(tmp_path))

    p1 = first.uploads[0]["path"]
    p2 = second.uploads[0]["path"]
    assert p1 != p2
    assert os.path.basename(p1) == os.path.basename(p2) == "notes.pdf"
    with open(p1, "rb") as fp:
        assert fp.read() == b"one"


@pytest.mark.django_db
def test_scratch_path_stays_inside_scratch_root(user, fake_file_client, tmp_path):
    upload = _pdf(name="../../evil.pdf")

    upload_and_summarize(user, upload, client_factory=lambda: fake_file_client, scratch_root=str(tmp_path))

    path = fake_file_client.uploads[0]["path"]
    assert os.path.commonpath([str(tmp_path), path]) == str(tmp_path)


@pytest.mark.django_db
def test_delete_is_scoped_to_owner(user, other_user):
    mine = Summary.objects.create(owner=user, file_name="a.pdf", file_type="application/pdf", summary_text="x")
    theirs = Summary.objects.create(owner=other_user, file_name="b.pdf", file_type="application/pdf", summary_text="y")

    assert delete_summary(user, theirs.id) == 0
    assert Summary.objects.filter(id=theirs.id).exists()

    assert delete_summary(user, mine.id) == 1
    assert not Summary.objects.filter(id=mine.id).exists()


@pytest.mark.django_db
def test_delete_reraises_store_error(user):
    class FailingDelete(SummaryStore):
        def delete(self, summary_id):
            raise StoreError("delete failed")

    with pytest.raises(StoreError):
        delete_summary(user, 1, store=FailingDelete(user))


@pytest.mark.django_db
def test_summary_text_is_stored_as_generated(user, tmp_path):
    client = FakeFileClient(text="## Summary\n- a\n")

    upload_and_summarize(user, _pdf(), client_factory=lambda: client, scratch_root=str(tmp_path))

    assert Summary.objects.get(owner=user).summary_text == "## Summary\n- a\n"
