from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .reconciliation.controller import register as register_reconciliation

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format=getattr(settings, "LOG_FORMAT", logging.BASIC_FORMAT),
    )

    container = build_container(
        shift_config=getattr(settings, "SHIFT_CONFIG"),
        duplicate_threshold_minutes=getattr(settings, "DUPLICATE_THRESHOLD_MINUTES"),
        chunk_size=getattr(settings, "BATCH_CHUNK_SIZE"),
    )
    app.extensions["reconciliation_container"] = container
    logger.info("Loaded %s (shift configuration %s)", settings_module, container.shift.version)

    register_reconciliation(app, container)

    return app
