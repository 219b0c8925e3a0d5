"""CSV Export Route: content type, attachment filename and group validation."""

from datetime import timedelta

from tests.fake_clock import T0


async def test_export_all_groups(client, store, group_id):
    r = await store.create_round(group_id, T0)
    await store.close_round(r.id, T0 + timedelta(minutes=90))

    res = await client.get("/api/v1/export/csv")

    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/csv")
    disposition = res.headers["content-disposition"]
    assert disposition.startswith('attachment; filename="workinghours-all-groups-')
    assert disposition.endswith('.csv"')
    lines = res.text.splitlines()
    assert lines[0] == (
        "Round ID,Working Group,Start Time,End Time,Duration (minutes),Status"
    )
    assert lines[1] == (
        f"{r.id},Eng,2026-03-10 09:00:00,2026-03-10 10:30:00,90.00,Completed"
    )


async def test_export_single_group_filename(client, group_id):
    res = await client.get("/api/v1/export/csv", params={"group_id": group_id})

    assert res.status_code == 200
    assert 'filename="workinghours-Eng-' in res.headers["content-disposition"]


async def test_export_unknown_group(client):
    res = await client.get("/api/v1/export/csv", params={"group_id": 999})
    assert res.status_code == 404


async def test_export_invalid_group_id(client):
    res = await client.get("/api/v1/export/csv", params={"group_id": "abc"})
    assert res.status_code == 400
