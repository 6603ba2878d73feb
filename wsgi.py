"""
wsgi.py: production entry point for Gunicorn
Configures logging and exposes the Flask app.
"""
from __future__ import annotations

import logging

from config.settings import settings

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s  %(levelname)-8s  %(name)-24s  %(message)s",
    datefmt="%H:%M:%S",
)
logger = logging.getLogger("dday.wsgi")

from engine.metrics import MetricsEngine
from web_app import create_app

engine = MetricsEngine()
app = create_app(engine)

logger.info("WSGI app ready: D-Day Counter")
