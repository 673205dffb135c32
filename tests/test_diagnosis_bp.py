"""
Testes das rotas /api/v1/diagnosis e do comando `flask diagnose`.

Como rodar:
    python -m pytest tests/test_diagnosis_bp.py -v
"""
from plantdoctor import create_app
from tests.conftest import LocalTestConfig, IMAGE_B64, IMAGE_BYTES, DISEASED_RESULT, make_response

ANALYZE_URL = "/api/v1/diagnosis/analyze"


class NoKeyConfig(LocalTestConfig):
    GEMINI_API_KEY = ''


class SmallBodyConfig(LocalTestConfig):
    MAX_CONTENT_LENGTH = 64


class TestAnalyzeEndpoint:

    def test_success_envelope(self, client, gemini_client):
        gemini_client.instance.aio.models.generate_content.return_value = make_response(DISEASED_RESULT)

        response = client.post(ANALYZE_URL, json={
            "image": "data:image/jpeg;base64," + IMAGE_B64,
            "language": "English",
            "symptoms": "brown rings",
        })

        assert response.status_code == 200
        body = response.get_json()
        assert body["status"] == "success"
        assert body["data"] == DISEASED_RESULT

    def test_default_language_from_config(self, client, gemini_client):
        client.post(ANALYZE_URL, json={"image": IMAGE_B64})

        kwargs = gemini_client.instance.aio.models.generate_content.call_args.kwargs
        assert "Português" in kwargs["config"].system_instruction
        assert kwargs["contents"][0].inline_data.data == IMAGE_BYTES

    def test_missing_image(self, client, gemini_client):
        response = client.post(ANALYZE_URL, json={"language": "English"})

        assert response.status_code == 400
        body = response.get_json()
        assert body["error_code"] == "BAD_REQUEST"
        assert body["details"][0]["field"] == "image"
        gemini_client.assert_not_called()

    def test_body_not_json(self, client, gemini_client):
        response = client.post(ANALYZE_URL, data="image", content_type="text/plain")

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "BAD_REQUEST"

    def test_empty_json_object(self, client, gemini_client):
        response = client.post(ANALYZE_URL, json={})

        assert response.status_code == 400
        body = response.get_json()
        assert body["error_code"] == "BAD_REQUEST"
        assert body["message"] == "Dados da requisição inválidos."
        assert body["details"][0]["field"] == "image"
        gemini_client.assert_not_called()

    def test_prefix_only_image(self, client, gemini_client):
        response = client.post(ANALYZE_URL, json={"image": "data:image/jpeg;base64,"})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_IMAGE"
        gemini_client.assert_not_called()

    def test_payload_too_large(self, gemini_client):
        client = create_app(SmallBodyConfig).test_client()

        response = client.post(ANALYZE_URL, json={"image": IMAGE_B64 * 10})

        assert response.status_code == 413
        assert response.get_json()["error_code"] == "PAYLOAD_TOO_LARGE"
        gemini_client.assert_not_called()

    def test_invalid_base64(self, client, gemini_client):
        response = client.post(ANALYZE_URL, json={"image": "***"})

        assert response.status_code == 400
        assert response.get_json()["error_code"] == "INVALID_IMAGE"

    def test_analysis_failure(self, client, gemini_client):
        gemini_client.instance.aio.models.generate_content.return_value = make_response("not json")

        response = client.post(ANALYZE_URL, json={"image": IMAGE_B64})

        assert response.status_code == 502
        body = response.get_json()
        assert body["error_code"] == "ANALYSIS_FAILED"
        assert "billing" in body["message"]

    def test_missing_api_key(self, gemini_client):
        client = create_app(NoKeyConfig).test_client()

        response = client.post(ANALYZE_URL, json={"image": IMAGE_B64})

        assert response.status_code == 500
        assert response.get_json()["error_code"] == "MISSING_API_KEY"
        gemini_client.assert_not_called()


class TestStatusesEndpoint:

    def test_lists_fixed_vocabulary(self, client):
        response = client.get("/api/v1/diagnosis/statuses")

        assert response.status_code == 200
        assert response.get_json()["data"] == ["Healthy", "Diseased", "Uncertain"]


class TestDiagnoseCommand:

    def test_prints_diagnosis(self, app, gemini_client, tmp_path):
        gemini_client.instance.aio.models.generate_content.return_value = make_response(DISEASED_RESULT)
        image_path = tmp_path / "folha.jpg"
        image_path.write_bytes(IMAGE_BYTES)

        result = app.test_cli_runner().invoke(args=["diagnose", str(image_path), "--language", "English"])

        assert result.exit_code == 0
        assert "Tomato: Diseased" in result.output
        assert "Early blight" in result.output
        assert "Rotate crops yearly" in result.output

    def test_fails_without_api_key(self, gemini_client, tmp_path):
        image_path = tmp_path / "folha.jpg"
        image_path.write_bytes(IMAGE_BYTES)

        result = create_app(NoKeyConfig).test_cli_runner().invoke(args=["diagnose", str(image_path)])

        assert result.exit_code == 1
        assert "API Key is missing" in result.output
        gemini_client.assert_not_called()
