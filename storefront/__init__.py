"""Storefront pricing: cart pricing rules and book purchase summaries."""
import importlib
import logging
from storefront.database import init_db

__version__ = '0.1.0'


def _load_config(config_object):
    if not isinstance(config_object, str):
        return config_object
    module_name, _, attr = config_object.rpartition('.')
    return getattr(importlib.import_module(module_name), attr)


def init_app(config_object='config.Config'):
    """Configure logging and the database. Returns the loaded config."""
    config = _load_config(config_object)

    logging.basicConfig(
        level=getattr(config, 'LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )
    logging.getLogger(__name__).info(
        f"Initializing storefront ({getattr(config, 'ENV', 'development')})"
    )

    init_db(config)
    return config
