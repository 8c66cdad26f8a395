import json
import unittest
from unittest.mock import Mock

from fastapi.testclient import TestClient

from gdrivecheck.api import create_app
from gdrivecheck.checker import DownloadabilityChecker
from gdrivecheck.controller import GoogleDriveController


def _service(get_payload=None, list_payload=None, error=None):
    service = Mock()
    files_resource = Mock()
    request = Mock()
    service.files.return_value = files_resource
    files_resource.get.return_value = request
    files_resource.list.return_value = request
    if error is not None:
        request.execute.side_effect = error
    else:
        request.execute.return_value = get_payload if get_payload is not None else list_payload
    return service, files_resource


def _http_404():
    from googleapiclient.errors import HttpError

    resp = Mock()
    resp.status = 404
    resp.reason = "Not Found"
    body = {"error": {"code": 404, "message": "File not found: MISSING.", "errors": []}}
    return HttpError(resp=resp, content=json.dumps(body).encode("utf-8"))


class TestCheckDownloadableRoute(unittest.TestCase):
    def _client(self, service) -> TestClient:
        controller = GoogleDriveController.from_service(service)
        app = create_app(checker=DownloadabilityChecker.from_controller(controller))
        return TestClient(app)

    def test_file_pdf_yes(self) -> None:
        service, files_resource = _service(get_payload={"id": "F1", "mimeType": "application/pdf"})
        response = self._client(service).post(
            "/check-downloadable",
            json={"link": "https://drive.google.com/file/d/F1/view", "type": "pdf"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"result": "yes"})
        self.assertEqual(files_resource.get.call_args.kwargs["fileId"], "F1")

    def test_file_word_document_no(self) -> None:
        service, _ = _service(get_payload={"id": "F1", "mimeType": "application/msword"})
        response = self._client(service).post(
            "/check-downloadable",
            json={"link": "https://drive.google.com/file/d/F1/view", "type": "pdf"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"result": "no"})

    def test_folder_by_category(self) -> None:
        payload = {
            "files": [
                {"id": "A", "mimeType": "image/png"},
                {"id": "B", "mimeType": "application/pdf"},
            ]
        }
        link = "https://drive.google.com/drive/folders/D1"
        expected = {"video": "no", "image": "yes", "pdf": "yes"}
        for category, answer in expected.items():
            with self.subTest(category=category):
                service, files_resource = _service(list_payload=payload)
                response = self._client(service).post(
                    "/check-downloadable", json={"link": link, "type": category}
                )
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.json(), {"result": answer})
                self.assertEqual(files_resource.list.call_args.kwargs["q"], "'D1' in parents")

    def test_empty_folder_no(self) -> None:
        for category in ("pdf", "image", "video"):
            with self.subTest(category=category):
                service, _ = _service(list_payload={"files": []})
                response = self._client(service).post(
                    "/check-downloadable",
                    json={"link": "https://drive.google.com/drive/folders/D1", "type": category},
                )
                self.assertEqual(response.status_code, 200)
                self.assertEqual(response.json(), {"result": "no"})

    def test_invalid_type_without_remote_call(self) -> None:
        service, _ = _service(get_payload={})
        client = self._client(service)
        for body in (
            {"link": "https://drive.google.com/file/d/F1/view", "type": "audio"},
            {"link": "https://drive.google.com/file/d/F1/view"},
            {"link": "https://drive.google.com/file/d/F1/view", "type": None},
            {"link": None, "type": None},
        ):
            with self.subTest(body=body):
                response = client.post("/check-downloadable", json=body)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"error": "Invalid type"})
        service.files.assert_not_called()

    def test_invalid_link_format(self) -> None:
        service, _ = _service(get_payload={})
        response = self._client(service).post(
            "/check-downloadable",
            json={"link": "https://example.com/no-id", "type": "image"},
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid link format"})
        service.files.assert_not_called()

    def test_null_link_is_invalid_link_format(self) -> None:
        service, _ = _service(get_payload={})
        response = self._client(service).post(
            "/check-downloadable", json={"link": None, "type": "pdf"}
        )
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "Invalid link format"})
        service.files.assert_not_called()

    def test_folder_with_trashed_pdf_yes(self) -> None:
        payload = {"files": [{"id": "T1", "mimeType": "application/pdf", "trashed": True}]}
        service, files_resource = _service(list_payload=payload)
        response = self._client(service).post(
            "/check-downloadable",
            json={"link": "https://drive.google.com/drive/folders/D1", "type": "pdf"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"result": "yes"})
        self.assertEqual(files_resource.list.call_args.kwargs["q"], "'D1' in parents")

    def test_invalid_parameters(self) -> None:
        service, _ = _service(get_payload={})
        client = self._client(service)

        cases = [
            {"content": b"{not json", "headers": {"content-type": "application/json"}},
            {"json": ["https://drive.google.com/file/d/F1", "pdf"]},
            {"json": {"link": 42, "type": "pdf"}},
            {},
        ]
        for kwargs in cases:
            with self.subTest(kwargs=kwargs):
                response = client.post("/check-downloadable", **kwargs)
                self.assertEqual(response.status_code, 400)
                self.assertEqual(response.json(), {"error": "Invalid parameters"})
        service.files.assert_not_called()

    def test_provider_error_is_500_for_file_and_folder(self) -> None:
        for link in (
            "https://drive.google.com/file/d/MISSING/view",
            "https://drive.google.com/drive/folders/MISSING",
        ):
            with self.subTest(link=link):
                service, _ = _service(error=_http_404())
                response = self._client(service).post(
                    "/check-downloadable", json={"link": link, "type": "pdf"}
                )
                self.assertEqual(response.status_code, 500)
                self.assertEqual(response.json(), {"error": "File not found: MISSING."})

    def test_network_error_is_500(self) -> None:
        service, _ = _service(error=TimeoutError("timed out"))
        response = self._client(service).post(
            "/check-downloadable",
            json={"link": "https://drive.google.com/file/d/F1/view", "type": "video"},
        )
        self.assertEqual(response.status_code, 500)
        self.assertTrue(response.json()["error"])

    def test_health(self) -> None:
        service, _ = _service(get_payload={})
        response = self._client(service).get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "ok"})
        service.files.assert_not_called()


if __name__ == "__main__":
    unittest.main()
