def test_add_to_cart_sets_owner_from_token(client, store, customer):
    body = {"menuItemId": "m1", "name": "Soup", "price": 4.5, "userEmail": "victim@bistro.com"}
    r = client.post("/api/v1/cart", json=body, headers=customer["headers"])
    assert r.status_code == 200
    row = store.tables["carts"][0]
    assert row["user_email"] == customer["email"]
    assert row["menu_item_id"] == "m1"
    assert r.json()["id"] == row["id"]

def test_add_to_cart_requires_token(client, store):
    r = client.post("/api/v1/cart", json={"menuItemId": "m1", "price": 4.5})
    assert r.status_code == 401
    assert store.tables.get("carts", []) == []

def test_list_cart_self_match(client, store, customer, admin):
    store.seed("carts",
               {"user_email": customer["email"], "menu_item_id": "m1", "price": 3},
               {"user_email": admin["email"], "menu_item_id": "m2", "price": 8})
    own = client.get("/api/v1/cart", params={"userEmail": customer["email"]}, headers=customer["headers"])
    assert own.status_code == 200
    assert [c["menu_item_id"] for c in own.json()] == ["m1"]

    foreign = client.get("/api/v1/cart", params={"userEmail": admin["email"]}, headers=customer["headers"])
    assert foreign.status_code == 403

def test_delete_cart_item_only_own(client, store, customer, admin):
    [mine, theirs] = store.seed("carts",
                                {"user_email": customer["email"], "menu_item_id": "m1", "price": 3},
                                {"user_email": admin["email"], "menu_item_id": "m2", "price": 8})
    denied = client.delete(f"/api/v1/cart/{theirs['id']}", headers=customer["headers"])
    assert denied.status_code == 404
    assert len(store.tables["carts"]) == 2

    ok = client.delete(f"/api/v1/cart/{mine['id']}", headers=customer["headers"])
    assert ok.status_code == 200
    assert ok.json() == {"deletedCount": 1}
    assert [c["id"] for c in store.tables["carts"]] == [theirs["id"]]
