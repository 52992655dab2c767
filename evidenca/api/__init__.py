from flask import Blueprint, request

stroski_bp = Blueprint("stroski", __name__)  # /stroski
zaposleni_bp = Blueprint("zaposleni", __name__)  # /zaposleni


def request_payload():
    """JSON telo zahtevka; če to ni JSON, polja iz urlencoded forme."""
    data = request.get_json(silent=True)
    if data is None:
        data = request.form.to_dict()
    return data


from . import stroski_routes  # noqa: E402,F401
from . import zaposleni_routes  # noqa: E402,F401
