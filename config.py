"""
CONFIGURAÇÃO CENTRAL DO APP
o config reúne as variáveis de ambiente que o diagnóstico
precisa. Diferente de um crash na importação, a chave do Gemini
pode faltar aqui: o serviço confere a chave na hora da chamada
e devolve um erro de configuração claro para quem chamou.
Preencha o seu arquivo .env para tudo funcionar.
"""

import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Configurações da aplicação carregadas do ambiente."""

    # Chave de API do Gemini
    #   services/gemini_service
    GEMINI_API_KEY = os.getenv('GEMINI_API_KEY', '')

    # modelo multimodal usado na análise das folhas
    GEMINI_MODEL = os.getenv('GEMINI_MODEL', 'gemini-2.5-flash')

    # idioma usado quando o cliente não manda nenhum
    DEFAULT_LANGUAGE = os.getenv('DEFAULT_LANGUAGE', 'English')

    # limite do corpo da requisição (a foto vem em base64 no json)
    MAX_CONTENT_LENGTH = int(os.getenv('MAX_CONTENT_LENGTH', 10 * 1024 * 1024))
