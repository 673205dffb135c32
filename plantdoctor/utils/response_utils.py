"""
Utilitário que padroniza todos os retornos da API, assim
o app/site trata sucesso e erro sempre do mesmo jeito.
"""

from flask import jsonify

def make_success_response(data, message, status_code=200):
    return jsonify({
        "status": "success",
        "data": data,
        "message": message
    }), status_code

def make_error_response(message, error_code, status_code, details=None):
    body = {
        "status": "error",
        "data": None,
        "message": message,
        "error_code": error_code
    }
    # detalhes de validação (pydantic) quando houver
    if details:
        body["details"] = details
    return jsonify(body), status_code
