"""Shopping List Routes — CRUD over HTTP.

Invariants:
    - GET lists seeded items with id, name, checked
    - POST returns 201 and the created item including its new id
    - PUT returns 200 and the updated item; unknown id → 404; id mismatch → 400
    - DELETE returns 204 with an empty body; unknown id → 404
    - Malformed payloads → 400 and the store is untouched
"""

from uuid import uuid4


async def test_list_items_on_get(client):
    """Seeded items are listed as JSON with id, name and checked."""
    res = await client.get("/shopping-list")
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("application/json")
    body = res.json()
    assert isinstance(body, list)
    assert len(body) >= 1
    for item in body:
        assert {"id", "name", "checked"} <= set(item)


async def test_get_single_item(client, shopping_store):
    """GET by id returns that item."""
    existing = shopping_store.list_all()[0]
    res = await client.get(f"/shopping-list/{existing.id}")
    assert res.status_code == 200
    assert res.json() == existing.to_dict()


async def test_get_unknown_item_returns_404(client):
    """Unknown ids answer 404 RECORD_NOT_FOUND."""
    res = await client.get(f"/shopping-list/{uuid4()}")
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "RECORD_NOT_FOUND"


async def test_add_item_on_post(client, shopping_store):
    """POST answers 201 with the sent fields plus a new id."""
    new_item = {"name": "coffee", "checked": False}
    res = await client.post("/shopping-list", json=new_item)
    assert res.status_code == 201
    body = res.json()
    assert body["id"] is not None
    assert body == {**new_item, "id": body["id"]}
    assert body["id"] in shopping_store


async def test_post_keeps_name_verbatim(client, shopping_store):
    """A padded name comes back exactly as sent."""
    new_item = {"name": " coffee ", "checked": False}
    res = await client.post("/shopping-list", json=new_item)
    assert res.status_code == 201
    body = res.json()
    assert body == {**new_item, "id": body["id"]}
    assert shopping_store.get(body["id"]).fields.name == " coffee "


async def test_post_long_name(client):
    """A 201-character name is accepted."""
    res = await client.post("/shopping-list", json={"name": "c" * 201, "checked": False})
    assert res.status_code == 201
    assert res.json()["name"] == "c" * 201


async def test_post_missing_field_returns_400(client, shopping_store):
    """Missing checked answers 400 naming the field; nothing is added."""
    before = len(shopping_store)
    res = await client.post("/shopping-list", json={"name": "coffee"})
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"] == "body.checked" for d in error["details"])
    assert len(shopping_store) == before


async def test_post_non_bool_checked_returns_400(client):
    """A string for checked answers 400."""
    res = await client.post("/shopping-list", json={"name": "coffee", "checked": "yes"})
    assert res.status_code == 400


async def test_post_blank_name_returns_400(client, shopping_store):
    """A whitespace-only name answers 400; nothing is added."""
    before = len(shopping_store)
    res = await client.post("/shopping-list", json={"name": "   ", "checked": False})
    assert res.status_code == 400
    assert len(shopping_store) == before


async def test_post_malformed_json_returns_400(client):
    """Unparseable JSON answers 400."""
    res = await client.post(
        "/shopping-list", content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400


async def test_update_item_on_put(client):
    """PUT answers 200 with exactly the sent fields."""
    update_data = {"name": "foo", "checked": True}
    listed = (await client.get("/shopping-list")).json()
    update_data["id"] = listed[0]["id"]

    res = await client.put(f"/shopping-list/{update_data['id']}", json=update_data)

    assert res.status_code == 200
    assert res.json() == update_data


async def test_put_without_body_id_uses_path_id(client, shopping_store):
    """Omitting the body id updates the path id in place."""
    existing = shopping_store.list_all()[1]
    res = await client.put(
        f"/shopping-list/{existing.id}", json={"name": "rice", "checked": True},
    )
    assert res.status_code == 200
    assert res.json()["id"] == existing.id
    assert [r.id for r in shopping_store.list_all()][1] == existing.id


async def test_put_unknown_id_returns_404(client, shopping_store):
    """Unknown ids answer 404 and leave the list unchanged."""
    before = shopping_store.list_all()
    res = await client.put(
        f"/shopping-list/{uuid4()}", json={"name": "foo", "checked": True},
    )
    assert res.status_code == 404
    assert shopping_store.list_all() == before


async def test_put_id_mismatch_returns_400(client, shopping_store):
    """A body id different from the path id answers 400 ID_MISMATCH."""
    existing = shopping_store.list_all()[0]
    res = await client.put(
        f"/shopping-list/{existing.id}",
        json={"id": "something-else", "name": "foo", "checked": True},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "ID_MISMATCH"
    assert shopping_store.get(existing.id) == existing


async def test_delete_item_on_delete(client):
    """DELETE answers 204 with no body and removes only that item."""
    listed = (await client.get("/shopping-list")).json()
    target = listed[0]["id"]

    res = await client.delete(f"/shopping-list/{target}")

    assert res.status_code == 204
    assert res.content == b""
    remaining = (await client.get("/shopping-list")).json()
    assert target not in [item["id"] for item in remaining]
    assert len(remaining) == len(listed) - 1


async def test_delete_unknown_id_returns_404(client):
    """Deleting an unknown id answers 404."""
    res = await client.delete(f"/shopping-list/{uuid4()}")
    assert res.status_code == 404


async def test_delete_twice_returns_404(client, shopping_store):
    """The second delete of the same id answers 404."""
    target = shopping_store.list_all()[0].id
    assert (await client.delete(f"/shopping-list/{target}")).status_code == 204
    assert (await client.delete(f"/shopping-list/{target}")).status_code == 404
