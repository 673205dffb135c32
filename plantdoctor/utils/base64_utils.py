"""
Centraliza toda ação relacionada a imagens em b64. O app
manda a foto da folha como data-URL (data:image/png;base64,...)
e o gemini só quer os bytes, então limpamos tudo aqui.
"""

import base64
import re

# só esses prefixos são reconhecidos, qualquer outro segue intacto
DATA_URL_PREFIX = re.compile(r"^data:image/(png|jpg|jpeg);base64,")

MIME_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
}

DEFAULT_MIME_TYPE = "image/jpeg"


def strip_data_url_prefix(image_b64: str) -> str:
    """Remove o cabeçalho data-URL, se existir."""
    return DATA_URL_PREFIX.sub("", image_b64, count=1)


def detect_image_mime_type(image_b64: str) -> str:
    """Descobre o mime pelo prefixo. Sem prefixo, assume jpeg."""
    match = DATA_URL_PREFIX.match(image_b64)
    if not match:
        return DEFAULT_MIME_TYPE
    return MIME_TYPES[match.group(1)]


def decode_image_base64(image_b64: str) -> bytes:
    """
    Decodifica o base64 (já sem prefixo) de forma estrita.
    Lança binascii.Error se o texto não for base64 válido.
    """
    return base64.b64decode(image_b64, validate=True)


def encode_image_to_base64(image_path: str) -> str:
    """Lê uma imagem de um caminho e a codifica em base64."""
    with open(image_path, "rb") as image_file:
        return base64.b64encode(image_file.read()).decode('utf-8')
