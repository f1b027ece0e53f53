import logging

logger = logging.getLogger("openapi_downgrade")
logger.addHandler(logging.NullHandler())
