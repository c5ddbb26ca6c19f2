"""
Diagnosis service — FastAPI app.
Runs on port 5006.

Start with:
    uvicorn claritypath.diagnosis.main:app --port 5006 --reload
"""
import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response
from prometheus_client import make_asgi_app
from starlette.concurrency import run_in_threadpool

from claritypath.config import LOG_LEVEL, ClarityConfig
from claritypath.diagnosis.cors import set_cors_headers
from claritypath.diagnosis.main_logic import ClarityGenerator
from claritypath.metrics import requests_total

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

DIAGNOSIS_PATH = '/api/diagnosis'


def create_app(config: ClarityConfig | None = None) -> FastAPI:
    config = config or ClarityConfig.from_env()
    generator = ClarityGenerator(config)

    app = FastAPI(title='ClarityPath Diagnosis', version='0.1.0')
    app.state.config = config
    app.state.generator = generator

    # Expose /metrics endpoint for Prometheus scraping
    app.mount('/metrics', make_asgi_app())

    def _respond(response: Response, origin: str | None) -> Response:
        requests_total.labels(status=str(response.status_code)).inc()
        return set_cors_headers(response, origin, config.allowed_origins)

    @app.get('/health')
    def health():
        return {'status': 'ok', 'service': 'diagnosis'}

    @app.options(DIAGNOSIS_PATH)
    def diagnosis_preflight(request: Request):
        origin = request.headers.get('origin')
        logger.info(f'OPTIONS preflight from: {origin}')
        return _respond(Response(status_code=200), origin)

    @app.post(DIAGNOSIS_PATH)
    async def diagnosis(request: Request):
        """
        Generate a clarity entry for {"prompt": "..."}.

        - 200: ClarityEntry (live or fallback content, indistinguishable)
        - 400: prompt missing or empty
        - 500: body could not be read or anything else unexpected
        """
        origin = request.headers.get('origin')
        logger.info(f'POST request from: {origin}')

        try:
            body = await request.json()
            prompt = body.get('prompt') if isinstance(body, dict) else None

            if not prompt or not isinstance(prompt, str):
                return _respond(JSONResponse({'error': 'Prompt is required'}, status_code=400), origin)

            logger.info(f'Processing prompt: {prompt[:50]}...')
            entry = await run_in_threadpool(generator.run, prompt)
            return _respond(JSONResponse(entry.to_json(), status_code=200), origin)

        except Exception:
            logger.exception('Diagnosis API error')
            return _respond(JSONResponse({'error': 'Failed to generate diagnosis'}, status_code=500), origin)

    return app


app = create_app()
