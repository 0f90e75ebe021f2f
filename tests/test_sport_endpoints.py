from sqlalchemy import text


NOT_FOUND = {"success": False, "message": "Sport not found"}


def test_create_then_get_returns_same_record(client, tennis):
    assert tennis.get_json() == {"success": True, "message": "Sport data created successfully"}

    resp = client.get("/sports/tennis")
    assert resp.status_code == 200
    assert resp.get_json() == {
        "sport": "tennis",
        "recommended_foods": ["banana", "oats"],
        "avoid_foods": ["fried food"],
    }


def test_list_sports_decodes_food_lists(client, tennis):
    client.post(
        "/sports",
        json={"sport": "rowing", "recommended_foods": ["pasta"], "avoid_foods": []},
    )

    resp = client.get("/sports")
    assert resp.status_code == 200

    by_name = {s["sport"]: s for s in resp.get_json()}
    assert set(by_name) == {"tennis", "rowing"}
    assert by_name["tennis"]["recommended_foods"] == ["banana", "oats"]
    assert by_name["rowing"]["recommended_foods"] == ["pasta"]
    assert by_name["rowing"]["avoid_foods"] == []


def test_list_sports_empty_table(client):
    resp = client.get("/sports")
    assert resp.status_code == 200
    assert resp.get_json() == []


def test_get_unknown_sport_returns_404(client):
    resp = client.get("/sports/curling")
    assert resp.status_code == 404
    assert resp.get_json() == NOT_FOUND


def test_create_duplicate_sport_returns_500_with_detail(client, tennis):
    resp = client.post(
        "/sports",
        json={"sport": "tennis", "recommended_foods": [], "avoid_foods": []},
    )
    assert resp.status_code == 500

    body = resp.get_json()
    assert body["success"] is False
    assert body["message"]
    assert "UNIQUE" in body["message"]


def test_create_without_sport_is_rejected_by_storage(client):
    resp = client.post("/sports", json={"recommended_foods": ["rice"]})
    assert resp.status_code == 500
    assert resp.get_json()["success"] is False


def test_create_with_non_object_body_returns_400(client):
    resp = client.post("/sports", json=["tennis"])
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Request body must be a JSON object"}


def test_update_replaces_both_food_lists(client, tennis):
    resp = client.put(
        "/sports/tennis",
        json={"recommended_foods": ["rice"], "avoid_foods": ["sugar"]},
    )
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "message": "Sport data updated successfully"}

    record = client.get("/sports/tennis").get_json()
    assert record["recommended_foods"] == ["rice"]
    assert record["avoid_foods"] == ["sugar"]


def test_update_with_missing_fields_stores_null(client, engine, tennis):
    resp = client.put("/sports/tennis", json={"recommended_foods": ["rice"]})
    assert resp.status_code == 200

    with engine.connect() as conn:
        stored = conn.execute(
            text("SELECT recommended_foods, avoid_foods FROM sports WHERE sport = 'tennis'")
        ).one()
    assert stored.recommended_foods == '["rice"]'
    assert stored.avoid_foods is None

    record = client.get("/sports/tennis").get_json()
    assert record["avoid_foods"] is None


def test_update_unknown_sport_returns_404(client):
    resp = client.put(
        "/sports/curling",
        json={"recommended_foods": ["rice"], "avoid_foods": ["sugar"]},
    )
    assert resp.status_code == 404
    assert resp.get_json() == NOT_FOUND


def test_delete_then_get_returns_404(client, tennis):
    resp = client.delete("/sports/tennis")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "message": "Sport data deleted successfully"}

    resp = client.get("/sports/tennis")
    assert resp.status_code == 404
    assert resp.get_json() == NOT_FOUND


def test_delete_unknown_sport_returns_404(client):
    resp = client.delete("/sports/curling")
    assert resp.status_code == 404
    assert resp.get_json() == NOT_FOUND


def test_sport_names_with_spaces_round_trip(client):
    client.post(
        "/sports",
        json={"sport": "table tennis", "recommended_foods": ["nuts"], "avoid_foods": ["soda"]},
    )

    resp = client.get("/sports/table%20tennis")
    assert resp.status_code == 200
    assert resp.get_json()["recommended_foods"] == ["nuts"]


def test_malformed_stored_json_returns_500(client, engine):
    with engine.begin() as conn:
        conn.execute(
            text("INSERT INTO sports (sport, recommended_foods, avoid_foods) VALUES ('golf', 'not json', '[]')")
        )

    resp = client.get("/sports/golf")
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Error retrieving sport data"}

    resp = client.get("/sports")
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Error retrieving sports data"}


def test_storage_errors_return_structured_500(client, engine):
    with engine.begin() as conn:
        conn.execute(text("DROP TABLE sports"))

    assert client.get("/sports").get_json() == {
        "success": False,
        "message": "Error retrieving sports data",
    }
    assert client.get("/sports/tennis").status_code == 500

    resp = client.put("/sports/tennis", json={"recommended_foods": [], "avoid_foods": []})
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Error updating sport data"}

    resp = client.delete("/sports/tennis")
    assert resp.status_code == 500
    assert resp.get_json() == {"success": False, "message": "Error deleting sport data"}

    resp = client.post("/sports", json={"sport": "tennis", "recommended_foods": [], "avoid_foods": []})
    assert resp.status_code == 500
    assert "no such table" in resp.get_json()["message"]


def test_update_with_unparsable_json_returns_400_and_keeps_record(client, tennis):
    resp = client.put(
        "/sports/tennis",
        data='{"recommended_foods": ["rice"',
        content_type="application/json",
    )
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Request body must be valid JSON"}

    record = client.get("/sports/tennis").get_json()
    assert record["recommended_foods"] == ["banana", "oats"]
    assert record["avoid_foods"] == ["fried food"]


def test_create_with_unparsable_json_returns_400(client):
    resp = client.post("/sports", data='{"sport": "golf"', content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json() == {"success": False, "message": "Request body must be valid JSON"}

    assert client.get("/sports").get_json() == []


def test_update_with_non_json_content_type_reads_as_empty_body(client, tennis):
    resp = client.put("/sports/tennis", data="rice", content_type="text/plain")
    assert resp.status_code == 200

    record = client.get("/sports/tennis").get_json()
    assert record["recommended_foods"] is None
    assert record["avoid_foods"] is None
