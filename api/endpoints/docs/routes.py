from flask import jsonify

from endpoints.docs.openapiSpec import build_openapi_spec

def setup_routes(app, engine=None):

    spec = build_openapi_spec()

    def get_api_docs():
        return jsonify(spec), 200

    app.add_url_rule("/api-docs", view_func=get_api_docs, methods=["GET"])
