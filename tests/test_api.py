import httpx

from tests.fixtures import item, minimal_wardrobe, neutral_wardrobe, outerwear_pool


def _payload(items, weather="Sunny", occasion="Casual", **prefs):
    return {
        "user_id": "me",
        "items": [
            {"id": i.id, "category": i.category, "color": i.color, "styles": list(i.styles), "name": i.name}
            for i in items
        ],
        "preferences": {"weather": weather, "occasion": occasion, **prefs},
    }


async def test_health(client: httpx.AsyncClient):
    resp = await client.get("/v1/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


async def test_taxonomy(client: httpx.AsyncClient):
    resp = await client.get("/v1/taxonomy")
    assert resp.status_code == 200
    assert "Shorts/Skirts" in resp.json()["facets"]["category"]["values"]


async def test_recommend_outfits(client: httpx.AsyncClient):
    resp = await client.post("/v1/recommendations/outfits", json=_payload(minimal_wardrobe()))
    assert resp.status_code == 200
    data = resp.json()
    assert len(data["outfits"]) == 1
    primary = data["primary"]
    assert primary["type"] == "separates"
    assert primary["fingerprint"] == "t1-b1-none-s1"
    assert primary["top"]["id"] == "t1"
    assert primary["rule_score"] == 13.0
    assert len(primary["features"]) == 6


async def test_second_request_sees_history(client: httpx.AsyncClient):
    await client.post("/v1/recommendations/outfits", json=_payload(minimal_wardrobe()))
    resp = await client.post("/v1/recommendations/outfits", json=_payload(minimal_wardrobe()))
    assert resp.status_code == 200
    assert resp.json() == {"outfits": [], "primary": None}


async def test_recommend_without_shoes_is_422(client: httpx.AsyncClient):
    items = minimal_wardrobe()[:2]
    resp = await client.post("/v1/recommendations/outfits", json=_payload(items))
    assert resp.status_code == 422
    detail = resp.json()["detail"]
    assert detail["reason"] == "no_footwear"
    assert "shoes" in detail["message"]


async def test_disliked_outerwear_feeds_recommendations(client: httpx.AsyncClient):
    fb = {
        "user_id": "me",
        "outfit_type": "separates",
        "top_id": "t1",
        "bottom_id": "b1",
        "footwear_id": "s1",
        "outerwear_id": "o1",
        "liked": False,
    }
    resp = await client.post("/v1/feedback", json=fb)
    assert resp.status_code == 201

    items = minimal_wardrobe() + outerwear_pool(3)
    resp = await client.post("/v1/recommendations/outfits", json=_payload(items, weather="Cold"))
    assert resp.status_code == 200
    assert resp.json()["primary"]["outerwear"]["id"] != "o1"


async def test_explicit_penalized_ids_override_feedback(client: httpx.AsyncClient):
    items = minimal_wardrobe() + outerwear_pool(3)
    resp = await client.post(
        "/v1/recommendations/outfits", json=_payload(items, weather="Cold", penalized_ids=["o1", "o2"])
    )
    assert resp.json()["primary"]["outerwear"]["id"] == "o3"


async def test_feedback_metrics(client: httpx.AsyncClient):
    base = {"outfit_type": "dress", "dress_id": "d1", "footwear_id": "s1"}
    await client.post("/v1/feedback", json={**base, "liked": True})
    await client.post("/v1/feedback", json={**base, "liked": False})
    resp = await client.get("/v1/feedback/metrics", params={"user_id": "me"})
    assert resp.json() == {
        "total_feedback": 2,
        "total_likes": 1,
        "like_rate": 50.0,
        "constraint_satisfaction": 100.0,
    }


async def test_feedback_requires_pieces(client: httpx.AsyncClient):
    resp = await client.post("/v1/feedback", json={"outfit_type": "dress", "footwear_id": "s1", "liked": True})
    assert resp.status_code == 422


async def test_predict_attributes_local(client: httpx.AsyncClient):
    resp = await client.post("/v1/items/predict-attributes", json={"filename": "black_sneakers.jpg"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["attributes"]["category"] == "Footwear"
    assert data["attributes"]["color"] == "Black"
    assert data["meta"]["provider"] == "local"


async def test_predict_attributes_needs_input(client: httpx.AsyncClient):
    resp = await client.post("/v1/items/predict-attributes", json={})
    assert resp.status_code == 400


async def test_weather_outside_vocabulary_is_422(client: httpx.AsyncClient):
    resp = await client.post("/v1/recommendations/outfits", json=_payload(minimal_wardrobe(), weather="snowy"))
    assert resp.status_code == 422
    assert resp.json()["detail"][0]["loc"][-1] == "weather"


async def test_occasion_outside_vocabulary_is_422(client: httpx.AsyncClient):
    resp = await client.post("/v1/recommendations/outfits", json=_payload(minimal_wardrobe(), occasion="Picnic"))
    assert resp.status_code == 422


async def test_all_styles_occasion_accepted(client: httpx.AsyncClient):
    resp = await client.post("/v1/recommendations/outfits", json=_payload(minimal_wardrobe(), occasion="All Styles"))
    assert resp.status_code == 200


async def test_snowy_request_drops_shorts(client: httpx.AsyncClient):
    items = neutral_wardrobe(tops=1, bottoms=3, shoes=1) + [item("sk1", "Shorts/Skirts")]
    resp = await client.post("/v1/recommendations/outfits", json=_payload(items, weather="Snowy"))
    assert resp.status_code == 200
    bottoms = {o["bottom"]["id"] for o in resp.json()["outfits"]}
    assert bottoms
    assert "sk1" not in bottoms
