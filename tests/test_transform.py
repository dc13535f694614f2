from contractor_directory.etl import transform

ALL_FLAGS = ("energy_audit", "weatherization", "hvac_heat_pump", "electrical", "water_heater", "appliances")


def test_to_contractor_round_trip():
    record = {
        "id": 7,
        "title": {"rendered": "Acme HVAC"},
        "content": {"rendered": "<p>Great <b>service</b></p>"},
        "acf": {"hvac_heat_pump": True, "city": "Washington", "state": "DC"},
    }

    contractor = transform.to_contractor(record)

    assert contractor.id == "7"
    assert contractor.name == "Acme HVAC"
    assert contractor.description == "Great service"
    assert [(s.id, s.name) for s in contractor.services] == [(3, "HVAC / Heat Pump")]
    assert contractor.city == "Washington"
    assert contractor.state == "DC"
    assert contractor.states_served == ()
    assert contractor.certifications == ()
    assert contractor.distance is None


def test_services_empty_when_all_flags_false():
    record = {"id": 1, "acf": {flag: False for flag in ALL_FLAGS}}
    assert transform.to_contractor(record).services == ()


def test_services_follow_declared_order_when_all_flags_true():
    record = {"id": 1, "acf": {flag: True for flag in reversed(ALL_FLAGS)}}

    services = transform.to_contractor(record).services

    assert [s.id for s in services] == [1, 2, 3, 4, 5, 6]
    assert [s.name for s in services] == [
        "Energy Audit",
        "Weatherization",
        "HVAC / Heat Pump",
        "Electrical",
        "Water Heater",
        "Appliances",
    ]


def test_to_contractor_handles_missing_fields():
    contractor = transform.to_contractor({"id": 12})

    assert contractor.id == "12"
    assert contractor.name == ""
    assert contractor.description == ""
    assert contractor.email == ""
    assert contractor.phone == ""
    assert contractor.address_line1 == ""
    assert contractor.zip == ""
    assert contractor.featured_image_url is None
    assert contractor.services == ()


def test_to_contractor_handles_null_values():
    record = {"id": 3, "title": None, "content": {"rendered": None}, "acf": None, "_embedded": None}
    contractor = transform.to_contractor(record)
    assert contractor.name == ""
    assert contractor.description == ""


def test_to_contractor_maps_contact_and_address():
    record = {
        "id": 5,
        "acf": {
            "street_1": "1 Main St",
            "street_2": "Suite 2",
            "zip_code": "20001",
            "phone_number": "202-555-0100",
            "website": "https://acme.example",
            "email": "hi@acme.example",
        },
    }

    payload = transform.to_contractor(record).to_dict()

    assert payload["addressLine1"] == "1 Main St"
    assert payload["addressLine2"] == "Suite 2"
    assert payload["zip"] == "20001"
    assert payload["phone"] == "202-555-0100"
    assert payload["website"] == "https://acme.example"
    assert payload["email"] == "hi@acme.example"
    assert payload["statesServed"] == []
    assert "distance" not in payload


def test_featured_image_prefers_embedded_media():
    record = {
        "_embedded": {"wp:featuredmedia": [{"source_url": "https://cdn/a.jpg", "alt_text": ""}]},
        "featured_media_url": "https://cdn/legacy.jpg",
    }
    assert transform.extract_featured_image(record) == "https://cdn/a.jpg"


def test_featured_image_falls_back_to_legacy_field():
    assert transform.extract_featured_image({"_embedded": {}, "featured_media_url": "https://cdn/b.jpg"}) == "https://cdn/b.jpg"
    assert transform.extract_featured_image({"_embedded": {"wp:featuredmedia": []}}) is None


def test_strip_markup_decodes_entities():
    assert transform.strip_markup("<p>Heat &amp; Air</p>\n") == "Heat & Air"
    assert transform.strip_markup(None) == ""
