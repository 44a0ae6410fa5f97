"""Application package exposing the shared FunctionApp instance.

The FunctionApp is configured with FUNCTION-level authentication, so every
request must carry a function key. Upload grants are handed out to whoever
holds that key; the grant itself limits what they can do with it.
"""

from __future__ import annotations

import azure.functions as func

app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)

# Import route modules so decorators execute at import time
from .routes import credentials as _credential_routes  # noqa: F401
from .routes import docs as _docs_routes  # noqa: F401

__all__ = ["app"]
