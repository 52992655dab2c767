# Swagger (flasgger) nastavitve; dokumentacija poti je v docstringih handlerjev.

SWAGGER_CONFIG = {
    "headers": [],
    "specs": [
        {
            "endpoint": "apispec",
            "route": "/apispec.json",
            "rule_filter": lambda rule: True,
            "model_filter": lambda tag: True,
        }
    ],
    "static_url_path": "/flasgger_static",
    "swagger_ui": True,
    "specs_route": "/api-docs/",
}

SWAGGER_TEMPLATE = {
    "swagger": "2.0",
    "info": {
        "title": "Evidenca API",
        "description": "Stroški in zaposleni",
        "version": "1.0.0",
    },
    "consumes": ["application/json"],
    "produces": ["application/json"],
    "definitions": {
        "StrosekIn": {
            "type": "object",
            "required": ["name", "amount"],
            "properties": {
                "name": {"type": "string", "example": "Pisarniški material"},
                "amount": {"type": "number", "example": 250},
            },
        },
        "Strosek": {
            "type": "object",
            "properties": {
                "_id": {"type": "string"},
                "name": {"type": "string"},
                "amount": {"type": "number"},
            },
        },
        "ZaposleniIn": {
            "type": "object",
            "required": ["ime", "priimek", "email", "polozaj"],
            "properties": {
                "ime": {"type": "string", "example": "Janez"},
                "priimek": {"type": "string", "example": "Novak"},
                "email": {"type": "string", "example": "janez.novak@example.com"},
                "polozaj": {"type": "string", "example": "Računovodja"},
            },
        },
        "Zaposleni": {
            "type": "object",
            "properties": {
                "_id": {"type": "string"},
                "ime": {"type": "string"},
                "priimek": {"type": "string"},
                "email": {"type": "string"},
                "polozaj": {"type": "string"},
            },
        },
        "Error": {
            "type": "object",
            "properties": {"message": {"type": "string"}},
        },
    },
}
