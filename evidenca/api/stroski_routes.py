import logging

from flask import jsonify

from . import request_payload, stroski_bp
from ..db import get_store
from ..validation import parse_expense

logger = logging.getLogger(__name__)


@stroski_bp.post("")
def create_strosek():
    """
    API: POST /stroski
    Ustvari nov strošek. Telo: {"name": "...", "amount": 250}
    ---
    tags:
      - stroski
    parameters:
      - in: body
        name: body
        required: true
        schema:
          $ref: '#/definitions/StrosekIn'
    responses:
      201:
        description: Ustvarjen strošek
        schema:
          $ref: '#/definitions/Strosek'
      400:
        description: Invalid name / Invalid amount
        schema:
          $ref: '#/definitions/Error'
    """
    # iz forme pride amount kot niz, zato ga validacija zavrne
    expense = parse_expense(request_payload())
    created = get_store().create_expense(expense)
    return jsonify(created), 201


@stroski_bp.get("")
def list_stroski():
    """
    API: GET /stroski
    ---
    tags:
      - stroski
    responses:
      200:
        description: Vsi stroški
        schema:
          type: array
          items:
            $ref: '#/definitions/Strosek'
    """
    return jsonify(get_store().list_expenses())
