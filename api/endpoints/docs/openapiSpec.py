from typing import Any, Dict

FOOD_LIST_SCHEMA = {"type": "array", "items": {"type": "string"}}

SPORT_PATH_PARAM = {
    "in": "path",
    "name": "sport",
    "required": True,
    "description": "The name of the sport",
    "schema": {"type": "string"},
}

RESULT_SCHEMA = {
    "type": "object",
    "properties": {
        "success": {"type": "boolean"},
        "message": {"type": "string"},
    },
}


def _json(schema, description):
    return {
        "description": description,
        "content": {"application/json": {"schema": schema}},
    }


def build_openapi_spec() -> Dict[str, Any]:
    """OpenAPI 3 description of the /sports routes, served at /api-docs."""
    sport_record = {"$ref": "#/components/schemas/SportRecord"}
    food_lists = {
        "type": "object",
        "properties": {
            "recommended_foods": FOOD_LIST_SCHEMA,
            "avoid_foods": FOOD_LIST_SCHEMA,
        },
    }

    not_found = _json(RESULT_SCHEMA, "Sport not found")
    server_error = _json(RESULT_SCHEMA, "Internal server error")

    return {
        "openapi": "3.0.3",
        "info": {
            "title": "Sports API",
            "description": "API to manage sports data",
            "version": "1.0.0",
        },
        "tags": [
            {"name": "Sports", "description": "API endpoints for managing sports data"},
        ],
        "paths": {
            "/sports": {
                "get": {
                    "summary": "Get all sports data",
                    "description": "Retrieve all sports data from the database",
                    "tags": ["Sports"],
                    "responses": {
                        "200": _json({"type": "array", "items": sport_record}, "Successful response"),
                        "500": server_error,
                    },
                },
                "post": {
                    "summary": "Create new sport data",
                    "description": "Create new sport data and add it to the database",
                    "tags": ["Sports"],
                    "requestBody": {
                        "required": True,
                        "content": {"application/json": {"schema": sport_record}},
                    },
                    "responses": {
                        "200": _json(RESULT_SCHEMA, "Successful response"),
                        "400": _json(RESULT_SCHEMA, "Request body is not valid JSON or not a JSON object"),
                        "500": server_error,
                    },
                },
            },
            "/sports/{sport}": {
                "get": {
                    "summary": "Get data for a specific sport",
                    "description": "Retrieve data for a specific sport from the database",
                    "tags": ["Sports"],
                    "parameters": [SPORT_PATH_PARAM],
                    "responses": {
                        "200": _json(sport_record, "Successful response"),
                        "404": not_found,
                        "500": server_error,
                    },
                },
                "put": {
                    "summary": "Update sport data",
                    "description": "Update data for a specific sport in the database",
                    "tags": ["Sports"],
                    "parameters": [SPORT_PATH_PARAM],
                    "requestBody": {
                        "required": True,
                        "content": {"application/json": {"schema": food_lists}},
                    },
                    "responses": {
                        "200": _json(RESULT_SCHEMA, "Successful response"),
                        "400": _json(RESULT_SCHEMA, "Request body is not valid JSON or not a JSON object"),
                        "404": not_found,
                        "500": server_error,
                    },
                },
                "delete": {
                    "summary": "Delete sport data",
                    "description": "Delete data for a specific sport from the database",
                    "tags": ["Sports"],
                    "parameters": [SPORT_PATH_PARAM],
                    "responses": {
                        "200": _json(RESULT_SCHEMA, "Successful response"),
                        "404": not_found,
                        "500": server_error,
                    },
                },
            },
        },
        "components": {
            "schemas": {
                "SportRecord": {
                    "type": "object",
                    "properties": {
                        "sport": {"type": "string"},
                        "recommended_foods": FOOD_LIST_SCHEMA,
                        "avoid_foods": FOOD_LIST_SCHEMA,
                    },
                },
            },
        },
    }
