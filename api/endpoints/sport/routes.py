from endpoints.sport.sportEndpoints import SportEndpoints

def setup_routes(app, engine):

    sportEndpoints = SportEndpoints(engine)

    app.add_url_rule("/sports", view_func=sportEndpoints.get_sports, methods=["GET"])
    app.add_url_rule("/sports", view_func=sportEndpoints.create_sport, methods=["POST"])
    app.add_url_rule("/sports/<sport>", view_func=sportEndpoints.get_sport, methods=["GET"])
    app.add_url_rule("/sports/<sport>", view_func=sportEndpoints.update_sport, methods=["PUT"])
    app.add_url_rule("/sports/<sport>", view_func=sportEndpoints.delete_sport, methods=["DELETE"])
