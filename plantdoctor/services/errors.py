"""
Erros do serviço de diagnóstico. Só existem dois tipos que o
usuário vê: falta de chave e falha na análise. A falha na análise
guarda o motivo em `reason` para quem precisar distinguir, mas a
mensagem é sempre a mesma.
"""

ANALYSIS_FAILED_MESSAGE = (
    "Failed to analyze image. Please check if your API key is valid and has billing enabled."
)

MISSING_API_KEY_MESSAGE = (
    "API Key is missing. Please set GEMINI_API_KEY in your environment (.env)."
)


class GeminiServiceError(Exception):
    """Base de todos os erros do serviço."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MissingApiKeyError(GeminiServiceError):
    """Chave do Gemini ausente. Lançado antes de qualquer chamada de rede."""

    def __init__(self, message: str = MISSING_API_KEY_MESSAGE):
        super().__init__(message)


class PlantAnalysisError(GeminiServiceError):
    """Falha genérica na análise da imagem."""

    REQUEST_FAILED = "request_failed"
    EMPTY_RESPONSE = "empty_response"
    INVALID_RESPONSE = "invalid_response"
    INVALID_IMAGE = "invalid_image"

    def __init__(self, reason: str, message: str = ANALYSIS_FAILED_MESSAGE):
        super().__init__(message)
        self.reason = reason
