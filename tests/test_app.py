"""App wiring, error mapping and the upload/download helpers."""

from fastapi.testclient import TestClient

from notesphere.core.errors import format_validation_errors
from notesphere.services.downloads import (
    STREAM_CHUNK, content_disposition, download_name_for, placeholder_response, placeholder_text,
    stream_temp_file,
)
from notesphere.services.uploads import generate_filename, human_size, remove_upload, upload_path


class TestAppWiring:

    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}

    def test_unexpected_error_is_500(self, app):
        @app.get("/boom")
        def boom():
            raise RuntimeError("kaboom")

        with TestClient(app, raise_server_exceptions=False) as client:
            res = client.get("/boom")
        assert res.status_code == 500
        assert res.json() == {"detail": "Internal server error"}

    def test_cors_preflight(self, client):
        res = client.options("/classes", headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        })
        assert res.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_camel_case_query_alias(self, client):
        assert client.get("/books", params={"classId": "x"}).status_code == 400


class TestErrorFormatting:

    def test_joins_locations_and_messages(self):
        errors = [
            {"loc": ("body", "rating"), "msg": "Input should be less than or equal to 50"},
            {"loc": ("path", "book_id"), "msg": "Input should be a valid integer"},
        ]
        assert format_validation_errors(errors) == (
            "rating: Input should be less than or equal to 50; book_id: Input should be a valid integer"
        )

    def test_message_without_location(self):
        assert format_validation_errors([{"loc": ("body",), "msg": "Field required"}]) == "Field required"
        assert format_validation_errors([]) == "Invalid request"


class TestUploadHelpers:

    def test_human_size(self):
        assert human_size(2048) == "2.0 KB"
        assert human_size(1024 * 1024) == "1024.0 KB"
        assert human_size(3 * 1024 * 1024 + 512 * 1024) == "3.5 MB"

    def test_generated_name(self):
        name = generate_filename("pdfFile", "Organic Notes.PDF")
        field, millis, rand_ext = name.split("-")
        assert field == "pdfFile"
        assert millis.isdigit()
        assert rand_ext.endswith(".pdf")

    def test_upload_path_strips_directories(self, tmp_path):
        assert upload_path(tmp_path, "../../etc/passwd") == tmp_path / "passwd"

    def test_remove_missing_is_not_an_error(self, tmp_path):
        assert remove_upload(tmp_path, "nothing.pdf") is False
        (tmp_path / "x.pdf").write_bytes(b"x")
        assert remove_upload(tmp_path, "x.pdf") is True


class TestDownloadHelpers:

    def test_download_name(self):
        assert download_name_for("Concepts of Physics!") == "concepts-of-physics.txt"
        assert download_name_for("", ".pdf") == "resource.pdf"

    def test_content_disposition_non_ascii(self):
        assert content_disposition("notes.txt") == 'attachment; filename="notes.txt"'
        assert content_disposition("física.txt").startswith("attachment; filename*=utf-8''")

    def test_placeholder_text(self):
        text = placeholder_text("Video Lectures", None, {"Type": "video"})
        assert text.startswith("NoteSphere Resource")
        assert "Type: video" in text


class TestTempDownloadCleanup:
    """Placeholder files live only while they are being sent."""

    def test_removed_when_stream_is_aborted(self, tmp_path):
        path = tmp_path / "tmp" / "notes.txt"
        stream = stream_temp_file(path, "x" * (STREAM_CHUNK * 3))
        first = next(stream)
        assert len(first) == STREAM_CHUNK
        assert path.exists()
        stream.close()
        assert not path.exists()

    def test_removed_after_full_stream(self, tmp_path):
        path = tmp_path / "notes.txt"
        assert b"".join(stream_temp_file(path, "hello")) == b"hello"
        assert not path.exists()

    def test_response_never_sent_writes_nothing(self, tmp_path):
        temp_dir = tmp_path / "tmp"
        response = placeholder_response(temp_dir, "notes.txt", "hello")
        assert response.headers["content-disposition"] == 'attachment; filename="notes.txt"'
        assert not temp_dir.exists() or list(temp_dir.iterdir()) == []
