# apps/api/routes/classify.py
from flask import Blueprint, jsonify, request

from services.classifier import Category, InvalidInput, classify

bp = Blueprint("classify", __name__)

@bp.get("/categories")
def categories():
    return jsonify(categories=[c.value for c in Category])

@bp.post("/classify")
def classify_text():
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise InvalidInput("JSON object body with 'text' is required")
    # InvalidInput은 app 레벨 errorhandler에서 400 처리
    result = classify(payload.get("text"))
    return jsonify(result.to_dict())
