"""FastAPI application exposing the linkage computation.

Routes:
    POST /compute   {a, b, c, d, theta2} -> {grashof, theta31, theta32, theta41, theta42}
    GET  /status    liveness check

Errors are returned as {"error": <message>}: 400 for a malformed request,
422 for a degenerate linkage, 500 with a generic message for anything else.
"""

from __future__ import annotations

import json
import traceback

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from ..core.config import FourBarConfig, config_from_env
from ..core.errors import DomainError, ValidationError
from ..core.evaluator import compute_linkage, parse_request
from ..core.logging import get_logger, set_log_level

logger = get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(config: FourBarConfig | None = None) -> FastAPI:
    """Build the application.

    Args:
        config: Service configuration; read from the environment when None.
    """
    config = config or config_from_env()
    set_log_level(config.logging.level)

    app = FastAPI(title="fourbar")
    app.state.config = config

    @app.get("/status")
    def get_status():
        return {"status": "operational"}

    @app.post("/compute")
    async def compute(request: Request, debug: bool = False):
        try:
            body = await request.body()
            try:
                # an empty body reads as {} so it reports the missing fields
                payload = json.loads(body) if body.strip() else {}
            except ValueError:
                raise ValidationError("Request body must be valid JSON") from None

            a, b, c, d, theta2 = parse_request(payload)
            result = compute_linkage(a, b, c, d, theta2, config=app.state.config)
        except ValidationError as e:
            logger.warn("rejected request", reason=str(e))
            return _error(400, str(e))
        except DomainError as e:
            logger.warn("degenerate linkage", reason=str(e))
            return _error(422, str(e))
        except Exception as e:
            logger.error(
                "Error in /compute",
                error=repr(e),
                traceback=traceback.format_exc(),
            )
            return _error(500, INTERNAL_ERROR_MESSAGE)

        return result.to_response(include_diagnostics=debug)

    return app
