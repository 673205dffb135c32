from enum import Enum
from typing import List, Optional

from google.genai import types
from pydantic import BaseModel, Field, field_validator


class PlantStatus(str, Enum):
    """Vocabulário fixo do status. Nunca é traduzido, o app usa para decidir o fluxo."""
    HEALTHY = "Healthy"
    DISEASED = "Diseased"
    UNCERTAIN = "Uncertain"


# MAIN SCHEMAS -
class DiseaseAnalysisResult(BaseModel):
    """Esquema do diagnóstico de uma folha gerado pelo Gemini."""
    plant_name: str = Field(..., description="Nome popular da planta, no idioma pedido.")
    status: PlantStatus = Field(..., description="Healthy, Diseased ou Uncertain (sempre em inglês).")
    disease_name: str = Field("None", description="Nome da doença no idioma pedido, ou 'None' se saudável.")
    confidence: float = Field(..., ge=0, le=100, description="Confiança do diagnóstico, de 0 a 100.")
    treatment_advice: str = Field(..., description="Guia prático de tratamento.")
    prevention_tips: List[str] = Field(..., description="Lista de 2 a 3 dicas para evitar que volte.")
    watering_advice: str = Field(..., description="Instruções de rega para essa condição.")


class DiagnosisRequest(BaseModel):
    """Corpo da requisição de /api/v1/diagnosis/analyze."""
    image: str = Field(..., min_length=1, description="Foto da folha em base64, com ou sem o prefixo data-URL.")
    language: Optional[str] = Field(None, description="Idioma das respostas traduzidas.")
    symptoms: Optional[str] = Field(None, description="Sintomas relatados pelo usuário.")

    @field_validator('image')
    @classmethod
    def image_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("A imagem (em base64) é obrigatória.")
        return value.strip()

    @field_validator('language', 'symptoms')
    @classmethod
    def blank_as_none(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        value = value.strip()
        return value or None


# campos que o modelo é obrigado a devolver
REQUIRED_FIELDS = [
    "plant_name",
    "status",
    "treatment_advice",
    "confidence",
    "prevention_tips",
    "watering_advice",
]

# Esquema declarado ao Gemini. Montado à mão para controlar
# exatamente o que é obrigatório (disease_name pode faltar).
DIAGNOSIS_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "plant_name": types.Schema(type=types.Type.STRING),
        "status": types.Schema(
            type=types.Type.STRING,
            enum=[status.value for status in PlantStatus],
        ),
        "disease_name": types.Schema(type=types.Type.STRING),
        "confidence": types.Schema(type=types.Type.NUMBER, minimum=0, maximum=100),
        "treatment_advice": types.Schema(type=types.Type.STRING),
        "prevention_tips": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
            min_items=2,
            max_items=3,
        ),
        "watering_advice": types.Schema(type=types.Type.STRING),
    },
    required=REQUIRED_FIELDS,
    property_ordering=[
        "plant_name",
        "status",
        "disease_name",
        "confidence",
        "treatment_advice",
        "prevention_tips",
        "watering_advice",
    ],
)
