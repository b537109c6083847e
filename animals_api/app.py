import logging
from typing import Optional

from fastapi import FastAPI
from sqlalchemy.engine import Engine

from animals_api import database
from animals_api.config import get_settings
from animals_api.handlers import api_router
from animals_api.utils.exceptions import register_exception_handlers


def setup_logging(level: str = 'INFO'):
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO),
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')


def create_app(engine: Engine, public_url: Optional[str] = None) -> FastAPI:
    """Build the API over an already connected engine, shared by every request."""
    if public_url is None:
        public_url = get_settings().public_url

    app = FastAPI(
        title='Animals API',
        version='1.0.0',
        description='RESTful API for animal management',
        servers=[{'url': public_url, 'description': 'Local development server'}],
        docs_url='/api-docs',
        openapi_url='/api-docs/openapi.json',
        redoc_url=None,
    )
    app.state.engine = engine
    app.state.session_factory = database.make_session_factory(engine)

    register_exception_handlers(app)
    app.include_router(api_router)
    return app
