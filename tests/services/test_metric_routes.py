"""Metric routes — registration, measurements, and optimality checks."""

BASE = "/api/v1/metrics"


def _metric(**overrides):
    body = {
        "metric_id": "bandwidth-utilization",
        "metric_name": "Network Bandwidth Utilization",
        "target_value": 80,
        "threshold_min": 60,
        "threshold_max": 90,
        "optimization_type": "bandwidth",
    }
    body.update(overrides)
    return body


async def test_register_metric(client, owner_headers):
    resp = await client.post(BASE, headers=owner_headers, json=_metric())
    assert resp.status_code == 201
    record = resp.json()["record"]
    assert record["current_value"] == 0
    assert record["optimization_type"] == "bandwidth"
    assert record["last_measured"] == 1


async def test_empty_band_is_invalid_threshold(client, owner_headers):
    resp = await client.post(
        BASE, headers=owner_headers, json=_metric(threshold_min=90, threshold_max=70),
    )
    assert resp.status_code == 400
    error = resp.json()["error"]
    assert error["code"] == "INVALID_THRESHOLD"
    assert error["ledger_code"] == 502


async def test_unknown_optimization_type_is_validation_error(client, owner_headers):
    resp = await client.post(
        BASE, headers=owner_headers, json=_metric(optimization_type="throughput"),
    )
    assert resp.status_code == 400
    assert resp.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_update_and_optimal(client, owner_headers):
    await client.post(BASE, headers=owner_headers, json=_metric())
    url = f"{BASE}/bandwidth-utilization"

    for value, expected in [(60, True), (90, True), (59, False), (91, False), (75, True)]:
        resp = await client.put(f"{url}/value", headers=owner_headers, json={"value": value})
        assert resp.status_code == 200
        assert resp.json()["current_value"] == value
        optimal = await client.get(f"{url}/optimal")
        assert optimal.json()["optimal"] is expected

    metric = (await client.get(url)).json()
    assert metric["current_value"] == 75
    assert metric["last_measured"] == 6


async def test_update_unknown_metric_is_404(client, owner_headers):
    resp = await client.put(f"{BASE}/missing/value", headers=owner_headers, json={"value": 1})
    assert resp.status_code == 404
    assert resp.json()["error"]["ledger_code"] == 501


async def test_stranger_cannot_update(client, owner_headers, stranger_headers):
    await client.post(BASE, headers=owner_headers, json=_metric())
    resp = await client.put(
        f"{BASE}/bandwidth-utilization/value", headers=stranger_headers, json={"value": 75},
    )
    assert resp.status_code == 403
    assert resp.json()["error"]["ledger_code"] == 500
    metric = (await client.get(f"{BASE}/bandwidth-utilization")).json()
    assert metric["current_value"] == 0


async def test_unknown_metric_lookups(client):
    assert (await client.get(f"{BASE}/nope")).json() is None
    assert (await client.get(f"{BASE}/nope/optimal")).json()["optimal"] is False
