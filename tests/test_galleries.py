def test_create_gallery(client):
    response = client.post("/api/customer/1/galleries", json={
        "slug": "a-b",
        "title": "T",
        "coupleNames": "A & B",
    })

    assert response.status_code == 201
    gallery = response.json()
    assert gallery["customerId"] == 1
    assert gallery["slug"] == "a-b"
    assert gallery["isPublished"] is False
    assert gallery["mediaItems"] == []
    assert gallery["createdAt"] is not None


def test_round_trip_update_changes_only_given_fields(client, db, make_gallery):
    created = make_gallery(slug="a-b", title="T", coupleNames="A & B")
    gallery_id = created["id"]

    fetched = client.get(f"/api/galleries/{gallery_id}").json()
    assert (fetched["slug"], fetched["title"], fetched["coupleNames"]) == ("a-b", "T", "A & B")

    before = db.get("wedding_galleries", gallery_id)
    response = client.put(f"/api/galleries/{gallery_id}", json={"description": "x"})
    assert response.status_code == 200

    refetched = client.get(f"/api/galleries/{gallery_id}").json()
    after = db.get("wedding_galleries", gallery_id)

    assert refetched["description"] == "x"
    for key in ("slug", "title", "coupleNames", "customerId", "isPublished", "mediaItems", "createdAt"):
        assert refetched[key] == fetched[key]
    assert after["updated_at"] > before["updated_at"]


def test_empty_update_still_refreshes_updated_at(client, db, make_gallery):
    created = make_gallery(slug="empty-body")
    before = db.get("wedding_galleries", created["id"])

    response = client.put(f"/api/galleries/{created['id']}", json={})

    assert response.status_code == 200
    assert response.json()["slug"] == "empty-body"
    after = db.get("wedding_galleries", created["id"])
    assert after["updated_at"] > before["updated_at"]
    assert after["title"] == before["title"]


def test_slug_defaults_to_title(make_gallery):
    gallery = make_gallery(title="Sarah & Michael's Wedding")
    assert gallery["slug"] == "sarah-michael-s-wedding"


def test_title_without_slug_characters_is_rejected(client):
    response = client.post("/api/customer/1/galleries", json={"title": "!!!", "coupleNames": "A & B"})

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "slug"


def test_duplicate_slug_is_rejected_across_owners(client, db, make_gallery):
    make_gallery(customer_id=1, slug="taken")
    before = db.count("wedding_galleries")

    response = client.post("/api/customer/2/galleries", json={
        "slug": "taken",
        "title": "Other",
        "coupleNames": "C & D",
    })

    assert response.status_code == 400
    assert response.json() == {"message": "Slug already exists"}
    assert db.count("wedding_galleries") == before


def test_create_gallery_validation_errors(client):
    response = client.post("/api/customer/1/galleries", json={"slug": "Bad Slug!"})

    assert response.status_code == 400
    body = response.json()
    fields = {e["field"] for e in body["errors"]}
    assert {"slug", "title", "coupleNames"} <= fields


def test_create_gallery_for_unknown_customer(client):
    response = client.post("/api/customer/999/galleries", json={"title": "T", "coupleNames": "A"})
    assert response.status_code == 404


def test_body_cannot_override_owner(client):
    response = client.post("/api/customer/1/galleries", json={
        "title": "T",
        "coupleNames": "A & B",
        "customerId": 2,
    })

    assert response.status_code == 201
    assert response.json()["customerId"] == 1


def test_media_items_and_branding_round_trip(client, make_gallery):
    gallery = make_gallery(
        slug="media",
        mediaItems=[
            {"id": "m1", "type": "image", "url": "data:image/png;base64,AAA", "caption": "First kiss"},
            {"id": 2, "type": "video", "url": "https://cdn.example.com/v.mp4", "thumbnailUrl": "https://cdn.example.com/v.jpg"},
        ],
        branding={"primaryColor": "#ffffff", "fontFamily": "Playfair"},
        customTexts={"footer": "With love"},
    )

    fetched = client.get(f"/api/galleries/{gallery['id']}").json()

    assert [m["id"] for m in fetched["mediaItems"]] == ["m1", 2]
    assert fetched["mediaItems"][0]["caption"] == "First kiss"
    assert fetched["mediaItems"][1]["thumbnailUrl"] == "https://cdn.example.com/v.jpg"
    assert fetched["branding"]["primaryColor"] == "#ffffff"
    assert fetched["branding"]["fontFamily"] == "Playfair"
    assert fetched["customTexts"]["footer"] == "With love"


def test_branding_keeps_extra_theme_keys(client, make_gallery):
    gallery = make_gallery(slug="themed", branding={"accentColor": "#000000", "fontSize": "18px"})

    fetched = client.get(f"/api/galleries/{gallery['id']}").json()

    assert fetched["branding"]["accentColor"] == "#000000"
    assert fetched["branding"]["fontSize"] == "18px"


def test_unknown_custom_text_keys_are_rejected(client):
    response = client.post("/api/customer/1/galleries", json={
        "title": "T",
        "coupleNames": "A & B",
        "customTexts": {"footer": "ok", "headline": "Hello"},
    })

    assert response.status_code == 400
    assert response.json()["errors"][0]["field"] == "customTexts.headline"


def test_invalid_media_item_is_rejected(client):
    response = client.post("/api/customer/1/galleries", json={
        "title": "T",
        "coupleNames": "A",
        "mediaItems": [{"id": 1, "type": "audio", "url": "x"}],
    })
    assert response.status_code == 400


def test_list_galleries_for_customer(client, make_gallery):
    make_gallery(customer_id=1, slug="one")
    make_gallery(customer_id=2, slug="two")
    make_gallery(customer_id=1, slug="three", isPublished=True)

    response = client.get("/api/customer/1/galleries")

    assert response.status_code == 200
    assert [g["slug"] for g in response.json()] == ["one", "three"]


def test_list_galleries_empty_is_not_an_error(client):
    response = client.get("/api/customer/999/galleries")

    assert response.status_code == 200
    assert response.json() == []


def test_public_lookup_hides_drafts(client, make_gallery):
    make_gallery(slug="draft")

    draft = client.get("/api/gallery/draft")
    missing = client.get("/api/gallery/never-existed")

    assert draft.status_code == missing.status_code == 404
    assert draft.json() == missing.json()


def test_public_lookup_after_publish(client, make_gallery):
    gallery = make_gallery(slug="live")
    client.put(f"/api/galleries/{gallery['id']}", json={"isPublished": True})

    response = client.get("/api/gallery/live")

    assert response.status_code == 200
    assert response.json()["id"] == gallery["id"]

    client.put(f"/api/galleries/{gallery['id']}", json={"isPublished": False})
    assert client.get("/api/gallery/live").status_code == 404


def test_slug_availability(client, make_gallery):
    make_gallery(slug="taken")

    assert client.get("/api/gallery/free-slug/available").json() == {"available": True}
    taken = client.get("/api/gallery/taken/available").json()
    assert taken["available"] is False
    assert taken["reason"]
    assert client.get("/api/gallery/Not_Valid/available").json()["available"] is False


def test_update_gallery_unknown_id(client):
    response = client.put("/api/galleries/999", json={"description": "x"})

    assert response.status_code == 404
    assert response.json() == {"message": "Gallery not found"}


def test_update_gallery_validation(client, make_gallery):
    gallery = make_gallery(slug="valid")

    assert client.put(f"/api/galleries/{gallery['id']}", json={"slug": "NOT VALID"}).status_code == 400
    assert client.put(f"/api/galleries/{gallery['id']}", json={"title": None}).status_code == 400
    assert client.put(f"/api/galleries/{gallery['id']}", json={"isPublished": "maybe"}).status_code == 400


def test_update_gallery_to_taken_slug(client, db, make_gallery):
    make_gallery(slug="first")
    second = make_gallery(slug="second")

    response = client.put(f"/api/galleries/{second['id']}", json={"slug": "first"})

    assert response.status_code == 400
    assert response.json()["message"] == "Slug already exists"
    assert db.get("wedding_galleries", second["id"])["slug"] == "second"


def test_update_gallery_keeping_own_slug(client, make_gallery):
    gallery = make_gallery(slug="mine")
    response = client.put(f"/api/galleries/{gallery['id']}", json={"slug": "mine", "title": "New"})

    assert response.status_code == 200
    assert response.json()["title"] == "New"


def test_delete_gallery(client, make_gallery):
    gallery = make_gallery(slug="gone", isPublished=True)

    response = client.delete(f"/api/galleries/{gallery['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Gallery deleted successfully"}
    assert client.get(f"/api/galleries/{gallery['id']}").status_code == 404
    assert client.get("/api/gallery/gone").status_code == 404
    # the slug is free again
    assert client.get("/api/gallery/gone/available").json() == {"available": True}


def test_delete_unknown_gallery(client):
    assert client.delete("/api/galleries/999").status_code == 404


def test_galleries_survive_owner_deactivation(client, make_gallery):
    make_gallery(customer_id=2, slug="kept", isPublished=True)
    client.delete("/api/admin/customers/2")

    assert [g["slug"] for g in client.get("/api/customer/2/galleries").json()] == ["kept"]
