from flask import jsonify

from . import request_payload, zaposleni_bp
from ..db import get_store
from ..validation import parse_employee


@zaposleni_bp.get("")
def list_zaposleni():
    """
    API: GET /zaposleni
    Vrne seznam vseh zaposlenih.
    ---
    tags:
      - zaposleni
    responses:
      200:
        description: Seznam zaposlenih
        schema:
          type: array
          items:
            $ref: '#/definitions/Zaposleni'
    """
    return jsonify(get_store().list_employees())


@zaposleni_bp.post("")
def create_zaposleni():
    """
    API: POST /zaposleni
    Vsa štiri polja (ime, priimek, email, polozaj) so obvezna.
    ---
    tags:
      - zaposleni
    parameters:
      - in: body
        name: body
        required: true
        schema:
          $ref: '#/definitions/ZaposleniIn'
    responses:
      201:
        description: Ustvarjen zaposleni
        schema:
          $ref: '#/definitions/Zaposleni'
      400:
        description: Vsa polja so obvezna
        schema:
          $ref: '#/definitions/Error'
    """
    employee = parse_employee(request_payload())
    return jsonify(get_store().create_employee(employee)), 201
