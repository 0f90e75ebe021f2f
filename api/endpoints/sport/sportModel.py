import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine

from utils.foodList import decode_sport_row, encode_food_list

logger = logging.getLogger(__name__)


class SportModel:
    def __init__(self, db: Engine):
        self.db = db

    def get_sports(self) -> List[Dict[str, Any]]:
        with self.db.begin() as conn:
            sports = conn.execute(
                text("SELECT sport, recommended_foods, avoid_foods FROM sports"),
            ).mappings().all()

        return [decode_sport_row(s) for s in sports]

    def get_sport(self, sport: str) -> Optional[Dict[str, Any]]:
        with self.db.begin() as conn:
            row = conn.execute(
                text("""
                    SELECT sport, recommended_foods, avoid_foods
                    FROM sports
                    WHERE sport = :sport
                """),
                {"sport": sport},
            ).mappings().first()

        if not row:
            return None

        return decode_sport_row(row)

    def create_sport(self, sport: Any, recommended_foods: Any, avoid_foods: Any) -> None:
        """
        Inserts one row into sports.

        - sport is the primary key, so a duplicate raises IntegrityError
        - food lists are stored as JSON text
        """
        params = {
            "sport": sport,
            "recommended_foods": encode_food_list(recommended_foods),
            "avoid_foods": encode_food_list(avoid_foods),
        }

        with self.db.begin() as conn:
            conn.execute(
                text("""
                    INSERT INTO sports (sport, recommended_foods, avoid_foods)
                    VALUES (:sport, :recommended_foods, :avoid_foods)
                """),
                params,
            )

        logger.debug("Created sport: %s", params)

    def update_sport(self, sport: str, recommended_foods: Any, avoid_foods: Any) -> int:
        """Replaces both food lists. Returns the number of rows affected."""
        with self.db.begin() as conn:
            result = conn.execute(
                text("""
                    UPDATE sports
                    SET recommended_foods = :recommended_foods,
                        avoid_foods = :avoid_foods
                    WHERE sport = :sport
                """),
                {
                    "sport": sport,
                    "recommended_foods": encode_food_list(recommended_foods),
                    "avoid_foods": encode_food_list(avoid_foods),
                },
            )
            affected = result.rowcount

        logger.debug("update_sport(sport=%s) -> %d rows", sport, affected)
        return affected

    def delete_sport(self, sport: str) -> int:
        with self.db.begin() as conn:
            result = conn.execute(
                text("DELETE FROM sports WHERE sport = :sport"),
                {"sport": sport},
            )
            affected = result.rowcount

        logger.debug("delete_sport(sport=%s) -> %d rows", sport, affected)
        return affected
