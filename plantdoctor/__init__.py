from flask import Flask
from config import Config
from .cli import register_commands

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # --- REGISTRO DOS BLUEPRINTS ---
    from .blueprints.diagnosis_bp import diagnosis_bp
    app.register_blueprint(diagnosis_bp)

    register_commands(app)

    if not app.config.get('GEMINI_API_KEY'):
        app.logger.warning("GEMINI_API_KEY não configurada: /analyze vai responder MISSING_API_KEY.")

    return app
