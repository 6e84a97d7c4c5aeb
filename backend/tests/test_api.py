from types import SimpleNamespace

from helpers import VALID_DIALER_FORM
from tracker.api.routes import reports as reports_routes

API = "/api/v1"


def test_health_and_request_id(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["x-request-id"]
    assert response.headers["X-Content-Type-Options"] == "nosniff"


def test_unknown_path_returns_json_404(client):
    response = client.get(f"{API}/nothing-here")
    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found", "path": f"{API}/nothing-here"}


def test_people_crud(client):
    created = client.post(f"{API}/people", json={"first_name": "Sam", "last_name": "Ortiz", "role": "setter"})
    assert created.status_code == 201
    body = created.json()
    assert body["full_name"] == "Sam Ortiz"
    assert body["role"] == "setter"

    assert client.get(f"{API}/people/{body['id']}").json()["id"] == body["id"]
    assert [p["id"] for p in client.get(f"{API}/people", params={"role": "setter"}).json()] == [body["id"]]
    assert client.get(f"{API}/people", params={"role": "closer"}).json() == []
    assert client.get(f"{API}/people/9999").status_code == 404


def test_form_loader_lists_fields_with_guides(client, dialer):
    response = client.get(f"{API}/eod/dialer/{dialer.id}")
    assert response.status_code == 200
    body = response.json()
    assert body["person"]["full_name"] == "Ann Lee"
    keys = [f["key"] for f in body["fields"]]
    assert keys[:4] == ["dials", "connects", "conversations", "qualifiedConversations"]
    revenue = next(f for f in body["fields"] if f["key"] == "revenueGenerated")
    assert revenue["kind"] == "currency"
    assert revenue["step"] == "0.01"
    assert body["fields"][0]["guide"]["description"]


def test_form_loader_rejects_person_of_another_role(client, dialer):
    response = client.get(f"{API}/eod/closer/{dialer.id}")
    assert response.status_code == 404
    assert response.json() == {"detail": "Closer not found"}


def test_unknown_role_is_rejected(client, dialer):
    assert client.get(f"{API}/eod/manager/{dialer.id}").status_code == 422


def test_submit_conflict_then_overwrite(client, dialer):
    url = f"{API}/eod/dialer/{dialer.id}"
    form = {**VALID_DIALER_FORM, "date": "2024-03-14"}

    first = client.post(url, data=form)
    assert first.status_code == 200
    assert first.json() == {"success": True}

    second = client.post(url, data={**form, "dials": "120"})
    assert second.status_code == 409
    assert second.json() == {"existingDate": "2024-03-14"}

    forced = client.post(url, data={**form, "dials": "120", "forceOverwrite": "true"})
    assert forced.status_code == 200
    assert forced.json() == {"success": True}


def test_submit_validation_errors(client, dialer):
    response = client.post(
        f"{API}/eod/dialer/{dialer.id}",
        data={**VALID_DIALER_FORM, "meetingsShowed": "6"},
    )
    assert response.status_code == 400
    errors = response.json()["errors"]
    assert errors["date"] == "Please select a date"
    assert errors["meetingsSet"] == "Meetings Set must equal Meetings Showed + No Shows"


def test_submit_for_missing_person(client, db):
    response = client.post(f"{API}/eod/setter/4242", data={"date": "2024-03-14"})
    assert response.status_code == 404
    assert response.json()["detail"] == "Setter not found"


def _seed_week(client, person_id):
    for day, dials in [("2024-03-10", "100"), ("2024-03-12", "200")]:
        form = {**VALID_DIALER_FORM, "dials": dials, "date": day}
        assert client.post(f"{API}/eod/dialer/{person_id}", data=form).status_code == 200


def test_analytics_rollup(client, dialer):
    _seed_week(client, dialer.id)
    params = {"range": "custom", "startDate": "2024-03-10", "endDate": "2024-03-16", "tz": "UTC"}

    response = client.get(f"{API}/analytics/dialer", params=params)
    assert response.status_code == 200
    body = response.json()
    assert body["days_in_range"] == 7
    assert body["days_in_previous_range"] == 7
    assert body["range"]["range"] == "custom"
    assert body["totals"]["dials"] == 300
    assert isinstance(body["totals"]["dials"], int)
    assert isinstance(body["averages"]["dials"], int)
    assert body["totals"]["cashCollected"] == 1000.5
    assert body["averages"]["dials"] == 43
    assert body["deltas"]["dials"] == 100
    assert [r["date"] for r in body["records"]] == ["2024-03-12", "2024-03-10"]
    assert body["records"][0]["person_name"] == "Ann Lee"
    assert body["records"][0]["meetingsSet"] == 10
    assert [p["date"] for p in body["series"]] == ["2024-03-10", "2024-03-12"]
    assert body["people"] == [{"id": dialer.id, "name": "Ann Lee"}]
    assert {r["name"] for r in body["rates"]} >= {"connect_rate", "close_rate"}


def test_analytics_person_filter(client, dialer):
    _seed_week(client, dialer.id)
    params = {"range": "custom", "startDate": "2024-03-10", "endDate": "2024-03-16", "personId": dialer.id + 1}
    body = client.get(f"{API}/analytics/dialer", params=params).json()
    assert body["records"] == []
    assert body["totals"]["dials"] == 0


def test_csv_and_pdf_exports(client, dialer):
    _seed_week(client, dialer.id)
    params = {"range": "custom", "startDate": "2024-03-10", "endDate": "2024-03-16"}

    csv_response = client.get(f"{API}/reports/dialer.csv", params=params)
    assert csv_response.status_code == 200
    assert csv_response.headers["content-type"].startswith("text/csv")
    assert "dialer-2024-03-10-2024-03-16.csv" in csv_response.headers["content-disposition"]
    lines = csv_response.text.strip().splitlines()
    assert lines[0].startswith("date,person_id,person,dials,connects")
    assert len(lines) == 3

    pdf_response = client.get(f"{API}/reports/dialer.pdf", params=params)
    assert pdf_response.status_code == 200
    assert pdf_response.headers["content-type"] == "application/pdf"
    assert pdf_response.content.startswith(b"%PDF")


def test_email_report_is_queued(client, monkeypatch):
    queued = []
    monkeypatch.setattr(
        reports_routes,
        "send_rollup_report",
        SimpleNamespace(delay=lambda *args, **kwargs: queued.append((args, kwargs))),
    )

    response = client.post(
        f"{API}/reports/closer/email",
        params={"range": "7d", "tz": "Europe/London"},
        json={"recipient_email": "ops@example.com"},
    )
    assert response.status_code == 202
    assert response.json() == {"status": "queued", "role": "closer", "recipient_email": "ops@example.com"}
    args, kwargs = queued[0]
    assert args == ("closer", "ops@example.com")
    assert kwargs["range_key"] == "7d"
    assert kwargs["tz"] == "Europe/London"
    assert kwargs["start_date"] is None


def test_email_report_requires_valid_address(client):
    response = client.post(f"{API}/reports/closer/email", json={"recipient_email": "not-an-email"})
    assert response.status_code == 422


def test_api_root_lists_roles_and_ranges(client):
    body = client.get(API).json()
    assert body["roles"] == ["dialer", "setter", "closer"]
    assert body["ranges"] == ["24h", "7d", "30d", "custom"]


def test_oversized_counter_is_a_field_error(client, dialer):
    response = client.post(
        f"{API}/eod/dialer/{dialer.id}",
        data={**VALID_DIALER_FORM, "dials": "1e19", "date": "2024-03-14"},
    )
    assert response.status_code == 400
    assert response.json() == {"errors": {"dials": "Please enter a valid number"}}


def test_analytics_custom_range_before_year_one_falls_back(client, dialer):
    params = {"range": "custom", "startDate": "0001-01-01", "endDate": "2024-01-01"}
    response = client.get(f"{API}/analytics/dialer", params=params)
    assert response.status_code == 200
    assert response.json()["range"]["range"] == "30d"
