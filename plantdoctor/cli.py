"""
Registro dos comandos do terminal (flask <comando>).
Serve principalmente para debugging: diagnosticar uma
foto local sem precisar subir o app.
"""

import asyncio
import click
from flask import current_app
from plantdoctor.models.schemas import PlantStatus
from plantdoctor.services.gemini_service import GeminiService
from plantdoctor.services.errors import GeminiServiceError
from plantdoctor.utils.base64_utils import encode_image_to_base64

STATUS_COLORS = {
    PlantStatus.HEALTHY: 'green',
    PlantStatus.DISEASED: 'red',
    PlantStatus.UNCERTAIN: 'yellow',
}

def register_commands(app):
    """Registra os comandos CLI customizados na aplicação Flask."""

    @app.cli.command("diagnose")
    @click.argument("image_path", type=click.Path(exists=True, dir_okay=False))
    @click.option("--language", "-l", default=None, help="Idioma das respostas (padrão: DEFAULT_LANGUAGE).")
    @click.option("--symptoms", "-s", default=None, help="Sintomas observados na planta.")
    def diagnose_command(image_path, language, symptoms):
        """
        Diagnostica a foto de uma folha usando o Gemini
        e imprime o resultado no terminal.
        """
        language = language or current_app.config['DEFAULT_LANGUAGE']
        click.echo(f"Analisando {image_path} ({language})...")

        try:
            image_b64 = encode_image_to_base64(image_path)
            gemini_service = GeminiService(
                api_key=current_app.config.get('GEMINI_API_KEY'),
                model=current_app.config['GEMINI_MODEL'],
            )
            result = asyncio.run(gemini_service.analyze_plant_image(image_b64, language, symptoms))
        except GeminiServiceError as e:
            click.secho(f"ERRO: {e.message}", fg='red', bold=True)
            raise SystemExit(1)

        click.secho(f"{result.plant_name}: {result.status.value}", fg=STATUS_COLORS[result.status], bold=True)
        click.echo(f"   - Doença: {result.disease_name}")
        click.echo(f"   - Confiança: {result.confidence:g}%")
        click.echo(f"   - Tratamento: {result.treatment_advice}")
        click.echo("   - Prevenção:")
        for tip in result.prevention_tips:
            click.echo(f"       * {tip}")
        click.echo(f"   - Rega: {result.watering_advice}")
