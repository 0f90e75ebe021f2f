# utils/foodList.py
import json
from typing import Any, Dict, Optional

FOOD_LIST_FIELDS = ("recommended_foods", "avoid_foods")


def encode_food_list(value: Any) -> Optional[str]:
    """
    Serialize a food list for a TEXT column. Whatever the client sent is
    passed through json.dumps as-is; absent/null becomes SQL NULL.
    """
    if value is None:
        return None
    return json.dumps(value)


def decode_food_list(raw: Optional[str]) -> Any:
    # Raises json.JSONDecodeError on corrupt column text
    if raw is None:
        return None
    return json.loads(raw)


def decode_sport_row(row: Dict[str, Any]) -> Dict[str, Any]:
    record = dict(row)
    for field in FOOD_LIST_FIELDS:
        record[field] = decode_food_list(record.get(field))
    return record
