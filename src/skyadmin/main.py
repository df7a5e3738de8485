from dotenv import load_dotenv
load_dotenv()

from fastapi import FastAPI
from skyadmin.api.routes.employees import router as employees_router
from skyadmin.api.middleware import ActorContextMiddleware
from skyadmin.api.exception_handlers import register_exception_handlers
import skyadmin.models  # ensure models are registered on Base.metadata
from skyadmin.logging_config import configure_logging
from prometheus_fastapi_instrumentator import Instrumentator
from skyadmin.tracing import configure_tracing
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor

# ------------------------------------------------------------------
# Configure Observability
# ------------------------------------------------------------------
configure_logging()
configure_tracing()

app = FastAPI(title="sky-admin")

app.add_middleware(ActorContextMiddleware)
register_exception_handlers(app)

app.include_router(employees_router)

# ------------------------------------------------------------------
# Observability
# ------------------------------------------------------------------
FastAPIInstrumentor.instrument_app(app)
Instrumentator().instrument(app).expose(app)

# ------------------------------------------------------------------
# Health Check
# ------------------------------------------------------------------
@app.get("/health")
def health_check():
    return {"status": "ok"}
