from fastapi import FastAPI
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.responses import Response

from birth_number.config import configure_logging
from birth_number.presentation.api.metrics import registry
from birth_number.presentation.api.routes.birth_numbers import router as birth_numbers_router
from birth_number.presentation.api.routes.health import router as health_router

configure_logging()

app = FastAPI(title="Birth Number Service", version="0.1.0")
app.include_router(health_router)
app.include_router(birth_numbers_router)


@app.get("/metrics")
def metrics() -> Response:  # type: ignore[misc]
    data = generate_latest(registry)
    return Response(content=data, media_type=CONTENT_TYPE_LATEST)
