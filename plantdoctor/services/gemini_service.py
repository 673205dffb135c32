import binascii
import logging
import os
from typing import Optional

from google import genai
from google.genai import types
from pydantic import ValidationError

from ..models.schemas import DiseaseAnalysisResult, DIAGNOSIS_RESPONSE_SCHEMA
from ..utils.base64_utils import strip_data_url_prefix, detect_image_mime_type, decode_image_base64
from .errors import MissingApiKeyError, PlantAnalysisError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"


def build_system_instruction(language: str) -> str:
    """Papel do modelo e a regra de idioma: tudo traduzido, menos o status."""
    return (
        "You are an expert agricultural plant pathologist and linguist.\n"
        "Your task is to analyze plant images and provide diagnosis and advice.\n\n"
        "CRITICAL LANGUAGE REQUIREMENT:\n"
        f"The user has requested the response in {language}.\n"
        f"You MUST translate all descriptive fields (plant_name, disease_name, treatment_advice, "
        f"prevention_tips, watering_advice) into {language}.\n"
        "However, the 'status' field MUST remain in English (Healthy, Diseased, Uncertain) "
        "for programmatic use."
    )


def build_prompt(language: str, symptoms: Optional[str] = None) -> str:
    """Pedido enviado junto com a imagem."""
    lines = ["Analyze this plant leaf image."]
    if symptoms and symptoms.strip():
        lines.append(f'Additional user-reported symptoms: "{symptoms.strip()}".')

    lines += [
        "",
        "Provide the output strictly in JSON format.",
        "",
        "Fields required:",
        f"1. plant_name: The common name of the plant (in {language}).",
        '2. status: One of "Healthy", "Diseased", "Uncertain".',
        f'3. disease_name: The name of the disease (in {language}), or "None" if healthy.',
        "4. confidence: A number between 0 and 100.",
        f"5. treatment_advice: A practical guide to treating the disease (in {language}).",
        f"6. prevention_tips: A list of 2-3 tips to prevent recurrence (in {language}).",
        f"7. watering_advice: Specific watering instructions for this condition (in {language}).",
    ]
    return "\n".join(lines)


class GeminiService:
    def __init__(self, api_key: Optional[str], model: str = DEFAULT_MODEL):
        # sem chave (ou só espaços) nada sai para a rede
        if not api_key or not api_key.strip():
            raise MissingApiKeyError()

        self.api_key = api_key
        self.model = model or DEFAULT_MODEL

    async def analyze_plant_image(
        self,
        base64_image: str,
        language: str,
        symptoms: Optional[str] = None,
    ) -> DiseaseAnalysisResult:
        """
        Diagnostica a folha da foto usando o Gemini.
        Qualquer falha vira PlantAnalysisError com a mesma mensagem;
        o detalhe fica só no log.
        """
        mime_type = detect_image_mime_type(base64_image)
        clean_base64 = strip_data_url_prefix(base64_image)

        try:
            image_bytes = decode_image_base64(clean_base64)
        except (binascii.Error, ValueError) as e:
            logger.error(f"Imagem em base64 inválida: {e}")
            raise PlantAnalysisError(PlantAnalysisError.INVALID_IMAGE) from e

        # só o prefixo data-URL, sem foto nenhuma
        if not image_bytes:
            logger.error("Imagem em base64 vazia")
            raise PlantAnalysisError(PlantAnalysisError.INVALID_IMAGE)

        # um client novo por chamada, fechado no final
        client = genai.Client(api_key=self.api_key)
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=[
                    types.Part.from_bytes(data=image_bytes, mime_type=mime_type),
                    build_prompt(language, symptoms),
                ],
                config=types.GenerateContentConfig(
                    system_instruction=build_system_instruction(language),
                    response_mime_type="application/json",
                    response_schema=DIAGNOSIS_RESPONSE_SCHEMA,
                ),
            )
        except Exception as e:
            logger.exception("Gemini Analysis Error")
            raise PlantAnalysisError(PlantAnalysisError.REQUEST_FAILED) from e
        finally:
            await client.aio.aclose()

        text = getattr(response, "text", None)
        if not text:
            logger.error("Gemini Analysis Error: No response from AI")
            raise PlantAnalysisError(PlantAnalysisError.EMPTY_RESPONSE)

        try:
            return DiseaseAnalysisResult.model_validate_json(text)
        except ValidationError as e:
            logger.exception(f"Gemini Analysis Error: resposta fora do esquema: {text[:200]}")
            raise PlantAnalysisError(PlantAnalysisError.INVALID_RESPONSE) from e


async def analyze_plant_image(
    base64_image: str,
    language: str,
    symptoms: Optional[str] = None,
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> DiseaseAnalysisResult:
    """
    Atalho de uma função só: lê a chave do ambiente na hora
    da chamada (se não vier por parâmetro) e faz a análise.
    """
    if api_key is None:
        api_key = os.getenv("GEMINI_API_KEY", "")

    service = GeminiService(api_key=api_key, model=model or DEFAULT_MODEL)
    return await service.analyze_plant_image(base64_image, language, symptoms)
