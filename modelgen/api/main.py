from __future__ import annotations

from fastapi import FastAPI

from modelgen import __version__
from modelgen.api.endpoints import health, metrics_export, models
from modelgen.api.middleware.error_shaping import SafeErrorMiddleware
from modelgen.api.middleware.request_context import RequestContextMiddleware

app = FastAPI(
    title="modelgen API",
    version=__version__,
)

# Starlette reverses add_middleware order: the LAST call is the OUTERMOST wrapper.
#   SafeErrorMiddleware -> RequestContextMiddleware -> handler
app.add_middleware(RequestContextMiddleware)
app.add_middleware(SafeErrorMiddleware)

app.include_router(health.router)
app.include_router(metrics_export.router)
app.include_router(models.router)
