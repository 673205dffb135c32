"""
Blueprints/rotas do diagnóstico de folhas.
(prefixo /api/v1/diagnosis/)
- /analyze -> manda a foto (base64) para o gemini e devolve o diagnóstico
- /statuses -> lista o vocabulário fixo de status
"""

from flask import Blueprint, request, current_app
from pydantic import ValidationError
from werkzeug.exceptions import BadRequest, RequestEntityTooLarge
from plantdoctor.models.schemas import DiagnosisRequest, PlantStatus
from plantdoctor.services.gemini_service import GeminiService
from plantdoctor.services.errors import MissingApiKeyError, PlantAnalysisError
from plantdoctor.utils.response_utils import make_success_response, make_error_response

diagnosis_bp = Blueprint('diagnosis_bp', __name__, url_prefix='/api/v1/diagnosis')


@diagnosis_bp.route('/analyze', methods=['POST'])
async def analyze_leaf():
    """
    Endpoint de diagnóstico: recebe a imagem, o idioma (opcional)
    e os sintomas (opcional) e devolve o diagnóstico estruturado.
    """
    try:
        data = request.get_json(silent=True)
        if data is None:
            raise BadRequest("O corpo da requisição deve ser um JSON.")

        payload = DiagnosisRequest.model_validate(data)
        language = payload.language or current_app.config['DEFAULT_LANGUAGE']

        gemini_service = GeminiService(
            api_key=current_app.config.get('GEMINI_API_KEY'),
            model=current_app.config['GEMINI_MODEL'],
        )
        result = await gemini_service.analyze_plant_image(payload.image, language, payload.symptoms)

        return make_success_response(result.model_dump(mode='json'), "Diagnóstico concluído.")

    except RequestEntityTooLarge:
        return make_error_response("A imagem excede o tamanho máximo permitido.", "PAYLOAD_TOO_LARGE", 413)
    except BadRequest as e:
        return make_error_response(e.description, "BAD_REQUEST", 400)
    except ValidationError as e:
        errors = [
            {"field": ".".join(str(loc) for loc in err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        return make_error_response("Dados da requisição inválidos.", "BAD_REQUEST", 400, details=errors)
    except MissingApiKeyError as e:
        current_app.logger.error(f"Erro em /analyze: {e}")
        return make_error_response(e.message, "MISSING_API_KEY", 500)
    except PlantAnalysisError as e:
        current_app.logger.error(f"Erro em /analyze ({e.reason}): {e}")
        if e.reason == PlantAnalysisError.INVALID_IMAGE:
            return make_error_response("A imagem enviada não é um base64 válido.", "INVALID_IMAGE", 400)
        return make_error_response(e.message, "ANALYSIS_FAILED", 502)
    except Exception as e:
        current_app.logger.error(f"Erro em /analyze: {e}")
        return make_error_response("Ocorreu um erro interno ao analisar a planta.", "INTERNAL_SERVER_ERROR", 500)


@diagnosis_bp.route('/statuses', methods=['GET'])
def list_statuses():
    """Retorna os status possíveis do diagnóstico (nunca traduzidos)."""
    statuses = [status.value for status in PlantStatus]
    return make_success_response(statuses, "Status carregados.")
