__version__ = "1.0.0"
__all__ = (
    "__version__",
    "BasicAuth",
    "BasicAuthMiddleware",
    "compare_inputs",
)

import logging

from basicgate.basicgate import BasicAuth
from basicgate.middlewares.security.basic_auth import BasicAuthMiddleware
from basicgate.security.authentication.verifier import compare_inputs

logger = logging.getLogger("basicgate")
logger.addHandler(logging.NullHandler())
