import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# .env may set RESPONSE_ENVELOPE_CONFIG, so load it before the package reads its config.
load_dotenv()

import uvicorn  # noqa: E402
from fastapi import FastAPI, Request  # noqa: E402
from fastapi.responses import Response  # noqa: E402

import response_envelope  # noqa: E402,F401  triggers logging setup
from response_envelope.config import configuration  # noqa: E402
from response_envelope.domain.responses import success_respond_to  # noqa: E402
from response_envelope.routers import demo_router  # noqa: E402
from response_envelope.utils.error_handlers import register_error_handlers  # noqa: E402

# ======================================================================================================================
#   Global Variables
# ======================================================================================================================
logger = logging.getLogger(Path(__file__).stem)


# =============================================================================
#   Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Messages locale: %s", configuration.messages.locale)
    logger.info("Application startup complete.")
    yield
    logger.info("Application shutdown complete.")


# =============================================================================
#   REST API app - response envelope demo
# =============================================================================
app = FastAPI(
    debug=False,
    title="Response Envelope Demo",
    description="Every endpoint answers with the {code, data, msg} envelope.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(demo_router)
register_error_handlers(app)


# =============================================================================
#   Root
# =============================================================================
@app.get("/", tags=["health"])
async def root(request: Request) -> Response:
    """Health-check root endpoint."""
    return success_respond_to(request, "Response envelope demo is up and running.")


# =============================================================================
#   Entry point
# =============================================================================
def main() -> None:
    uvicorn.run(
        "main:app",
        host=configuration.server.host,
        port=configuration.server.port,
        reload=False,
    )


if __name__ == "__main__":
    main()
