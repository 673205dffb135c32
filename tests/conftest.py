import base64
import json
from unittest.mock import MagicMock, AsyncMock, patch

import pytest

from config import Config
from plantdoctor import create_app


class LocalTestConfig(Config):
    TESTING = True
    GEMINI_API_KEY = 'test-key'
    GEMINI_MODEL = 'gemini-2.5-flash'
    DEFAULT_LANGUAGE = 'Português'


IMAGE_BYTES = b"\xff\xd8\xff\xe0fake-jpeg-leaf"
IMAGE_B64 = base64.b64encode(IMAGE_BYTES).decode('utf-8')

HEALTHY_RESULT = {
    "plant_name": "Tomateiro",
    "status": "Healthy",
    "disease_name": "None",
    "confidence": 92.5,
    "treatment_advice": "Nenhum tratamento necessário.",
    "prevention_tips": ["Evite molhar as folhas", "Faça rotação de culturas"],
    "watering_advice": "Regue 2 vezes por semana na base da planta.",
}

DISEASED_RESULT = {
    "plant_name": "Tomato",
    "status": "Diseased",
    "disease_name": "Early blight",
    "confidence": 81,
    "treatment_advice": "Remove infected leaves and apply a copper fungicide.",
    "prevention_tips": ["Mulch the soil", "Space plants for airflow", "Rotate crops yearly"],
    "watering_advice": "Water at soil level in the morning.",
}


def make_response(payload):
    """Resposta falsa do SDK: só o `.text` importa."""
    response = MagicMock()
    response.text = payload if payload is None or isinstance(payload, str) else json.dumps(payload)
    return response


@pytest.fixture
def gemini_client():
    """Substitui o genai.Client; nenhum teste sai para a rede."""
    with patch("plantdoctor.services.gemini_service.genai.Client") as client_cls:
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock(return_value=make_response(HEALTHY_RESULT))
        client.aio.aclose = AsyncMock()
        client_cls.return_value = client
        client_cls.instance = client
        yield client_cls


@pytest.fixture
def app():
    return create_app(LocalTestConfig)


@pytest.fixture
def client(app):
    return app.test_client()
