import logging
import os
import sys

from flask import Flask, jsonify, request
from pydantic import ValidationError

# Ensure project root is in path for imports
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from api.schemas import ErrorResponse, GradeRequest, GradeResponse
from verse_drill import GradingError, grade_attempt

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _error(message, kind, status, details=None):
    body = ErrorResponse(error=message, kind=kind, details=details)
    return jsonify(body.model_dump(exclude_none=True)), status


# ============================================================================
# ROUTES - HEALTH
# ============================================================================
@app.route('/health')
def health():
    return jsonify({"status": "ok"})


# ============================================================================
# ROUTES - GRADING
# ============================================================================
@app.route('/api/grade', methods=['POST'])
def grade():
    """Grade an attempt against its target passage.

    Body: {"targetText": str, "attemptText": str}
    Returns the GradeResult payload, or 400 with {error, kind}.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return _error("Solicitud incorrecta", "bad_request", 400)

    try:
        payload = GradeRequest.model_validate(data)
    except ValidationError as e:
        details = [{"loc": list(err["loc"]), "msg": err["msg"]} for err in e.errors()]
        return _error("Solicitud incorrecta", "bad_request", 400, details)

    try:
        result = grade_attempt(payload.target_text, payload.attempt_text)
    except GradingError as e:
        return _error(str(e), e.kind.value, 400)
    except Exception:
        logger.exception("Unexpected grading failure")
        return _error("Error al calificar", "internal", 500)

    response = GradeResponse.model_validate(result.to_dict())
    return jsonify(response.model_dump())


if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    port = int(os.environ.get("PORT", "5000"))
    app.run(host='0.0.0.0', port=port, debug=False)
