import logging
from datetime import datetime

from bson import ObjectId
from flask import current_app
from pymongo import MongoClient

logger = logging.getLogger(__name__)

STROSKI = "stroski"
ZAPOSLENI = "zaposleni"
FINANCNA_POROCILA = "financna_porocila"

EXTENSION_KEY = "evidenca_store"


def serialize(doc: dict) -> dict:
    """ObjectId -> str, datetime -> ISO 8601, da gre dokument skozi jsonify."""
    out = {}
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            out[key] = str(value)
        elif isinstance(value, datetime):
            out[key] = value.isoformat()
        else:
            out[key] = value
    return out


class Store:
    """
    Dostop do MongoDB baze. En objekt na aplikacijo; create_app ga pripne
    na app.extensions, handlerji pa ga dobijo preko get_store().
    """

    def __init__(self, db):
        self.db = db

    @classmethod
    def connect(cls, uri, db_name):
        client = MongoClient(uri)
        logger.info("povezava z MongoDB, baza %s", db_name)
        return cls(client[db_name])

    def _insert(self, collection, doc: dict) -> dict:
        doc = dict(doc)
        result = self.db[collection].insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info("nov zapis v %s: %s", collection, result.inserted_id)
        return serialize(doc)

    def _find_all(self, collection) -> list:
        return [serialize(d) for d in self.db[collection].find()]

    # Stroški
    def create_expense(self, expense) -> dict:
        return self._insert(STROSKI, expense.model_dump())

    def list_expenses(self) -> list:
        return self._find_all(STROSKI)

    # Zaposleni
    def create_employee(self, employee) -> dict:
        return self._insert(ZAPOSLENI, employee.model_dump())

    def list_employees(self) -> list:
        return self._find_all(ZAPOSLENI)

    # Finančna poročila (brez HTTP poti)
    def create_financial_report(self, report) -> dict:
        return self._insert(FINANCNA_POROCILA, report.to_document())

    def list_financial_reports(self) -> list:
        return self._find_all(FINANCNA_POROCILA)


def get_store() -> Store:
    return current_app.extensions[EXTENSION_KEY]
