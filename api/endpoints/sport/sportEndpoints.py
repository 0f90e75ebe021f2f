# endpoints/sport/sportEndpoints.py
import logging

from flask import request, jsonify
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import BadRequest

from endpoints.sport.sportModel import SportModel

logger = logging.getLogger(__name__)

NOT_FOUND = {"success": False, "message": "Sport not found"}


def _failure(message, status):
    return jsonify({"success": False, "message": message}), status


def _read_body():
    """
    Returns (data, error). A missing body or a non-JSON content type reads
    as {}. A JSON body that does not parse, or is not an object, is an error.
    """
    if not request.is_json or not request.get_data():
        return {}, None

    try:
        data = request.get_json()
    except BadRequest:
        return None, "Request body must be valid JSON"

    if data is None:
        return {}, None
    if not isinstance(data, dict):
        return None, "Request body must be a JSON object"
    return data, None


def storage_error_detail(e):
    """
    Driver message for a failed statement. MySQL drivers put
    (errno, message) in args; psycopg and sqlite carry just the message.
    """
    orig = getattr(e, "orig", None)
    if orig is None:
        return str(e)

    args = getattr(orig, "args", ())
    if len(args) == 2 and isinstance(args[0], int):
        return str(args[1])
    return str(orig)


class SportEndpoints:
    def __init__(self, db_engine):
        self.sportModel = SportModel(db_engine)

    # GET /sports
    def get_sports(self):
        try:
            sports = self.sportModel.get_sports()
        except (SQLAlchemyError, ValueError):
            logger.exception("Error retrieving sports data")
            return _failure("Error retrieving sports data", 500)

        return jsonify(sports), 200

    # GET /sports/<sport>
    def get_sport(self, sport):
        try:
            record = self.sportModel.get_sport(sport)
        except (SQLAlchemyError, ValueError):
            logger.exception("Error retrieving sport data for %s", sport)
            return _failure("Error retrieving sport data", 500)

        if not record:
            return jsonify(NOT_FOUND), 404

        return jsonify(record), 200

    # POST /sports
    # {
    #   "sport": "tennis",
    #   "recommended_foods": ["banana", "oats"],
    #   "avoid_foods": ["fried food"]
    # }
    def create_sport(self):
        data, error = _read_body()
        if error:
            return _failure(error, 400)

        try:
            self.sportModel.create_sport(
                sport=data.get("sport"),
                recommended_foods=data.get("recommended_foods"),
                avoid_foods=data.get("avoid_foods"),
            )
        except SQLAlchemyError as e:
            # Driver detail, e.g. the duplicate-key message
            msg = storage_error_detail(e) or "Error creating sport data"
            logger.warning("Error creating sport data: %s", msg)
            return _failure(msg, 500)

        return jsonify({"success": True, "message": "Sport data created successfully"}), 200

    # PUT /sports/<sport>
    # { "recommended_foods": ["rice"], "avoid_foods": ["sugar"] }
    def update_sport(self, sport):
        data, error = _read_body()
        if error:
            return _failure(error, 400)

        try:
            affected = self.sportModel.update_sport(
                sport,
                recommended_foods=data.get("recommended_foods"),
                avoid_foods=data.get("avoid_foods"),
            )
        except SQLAlchemyError:
            logger.exception("Error updating sport data for %s", sport)
            return _failure("Error updating sport data", 500)

        if affected == 0:
            return jsonify(NOT_FOUND), 404

        return jsonify({"success": True, "message": "Sport data updated successfully"}), 200

    # DELETE /sports/<sport>
    def delete_sport(self, sport):
        try:
            affected = self.sportModel.delete_sport(sport)
        except SQLAlchemyError:
            logger.exception("Error deleting sport data for %s", sport)
            return _failure("Error deleting sport data", 500)

        if affected == 0:
            return jsonify(NOT_FOUND), 404

        return jsonify({"success": True, "message": "Sport data deleted successfully"}), 200
