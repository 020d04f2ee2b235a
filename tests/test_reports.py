from conftest import ADMIN, REGULAR


def test_empty_report(client):
    r = client.get("/reports/assets", headers=ADMIN)
    assert r.status_code == 200
    assert r.json() == {
        "total_assets": 0,
        "assets_by_status": {},
        "assets_by_department": {},
        "assets_by_type": {},
        "maintenance_due": 0,
        "repair_requests_pending": 0,
    }


def test_report_counts(client, make_user, make_asset):
    nina = make_user("nina")
    pump = make_asset(department="ICU", type="medical_equipment", status="active")
    make_asset(department="ICU", type="furniture", status="damaged")
    make_asset(department="icu ", type="it_device", status="active")
    make_asset(department="Fleet", type="vehicle", status="under_repair")

    for when in ("2020-01-01T00:00:00", "2021-06-01T00:00:00", "2999-01-01T00:00:00"):
        client.post(
            "/maintenance-schedules",
            json={"asset_id": pump["id"], "scheduled_date": when, "maintenance_type": "check", "notes": None},
            headers=ADMIN,
        )

    ids = []
    for _ in range(3):
        r = client.post(
            "/repair-requests",
            json={"asset_id": pump["id"], "requested_by_user_id": nina["id"], "description": "x", "priority": "low"},
            headers=REGULAR,
        )
        ids.append(r.json()["id"])
    client.patch(f"/repair-requests/{ids[0]}", json={"status": "in_progress"}, headers=ADMIN)

    report = client.get("/reports/assets", headers=ADMIN).json()
    assert report["total_assets"] == 4
    assert report["assets_by_status"] == {"active": 2, "damaged": 1, "under_repair": 1}
    # department keys are not normalised
    assert report["assets_by_department"] == {"ICU": 2, "icu ": 1, "Fleet": 1}
    assert report["assets_by_type"] == {"medical_equipment": 1, "furniture": 1, "it_device": 1, "vehicle": 1}
    assert report["maintenance_due"] == 2
    assert report["repair_requests_pending"] == 2

    assert sum(report["assets_by_status"].values()) == report["total_assets"]
    assert sum(report["assets_by_type"].values()) == report["total_assets"]


def test_completed_maintenance_leaves_due_count(client, make_asset):
    asset = make_asset()
    row = client.post(
        "/maintenance-schedules",
        json={"asset_id": asset["id"], "scheduled_date": "2020-01-01T00:00:00", "maintenance_type": "check"},
        headers=ADMIN,
    ).json()
    assert client.get("/reports/assets", headers=ADMIN).json()["maintenance_due"] == 1

    client.patch(
        f"/maintenance-schedules/{row['id']}",
        json={"status": "completed", "completed_date": "2020-01-02T00:00:00"},
        headers=ADMIN,
    )
    assert client.get("/reports/assets", headers=ADMIN).json()["maintenance_due"] == 0


def test_report_follows_deletes(client, make_asset):
    asset = make_asset()
    make_asset()
    client.delete(f"/assets/{asset['id']}", headers=ADMIN)

    report = client.get("/reports/assets", headers=ADMIN).json()
    assert report["total_assets"] == 1
    assert sum(report["assets_by_status"].values()) == 1
