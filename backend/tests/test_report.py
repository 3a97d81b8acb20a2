from homehealth.scoring import INSUFFICIENT_DATA, Reading, baselines_for, build_report


def _readings():
    return [
        Reading("p", "CO2", 900, room_id="bedroom"),
        Reading("p", "CO2", 1300, room_id="kitchen"),
        Reading("p", "PM2.5", 7, room_id="bedroom"),
        Reading("p", "PM25", 21, room_id="kitchen"),
        Reading("p", "MagField", 1.0, room_id="bedroom"),
        Reading("p", "RF", 0.05),
        Reading("p", "Radon", 2.0, room_id="kitchen"),
    ]


def test_report_uses_worst_case_values(config):
    report = build_report(_readings(), config, baselines_for("houston"))
    assert report.values["CO2"] == 1300
    assert report.values["PM25"] == 21
    assert report.metrics["CO2"].score == 55
    assert report.metrics["CO2"].status == "Poor (Ventilation Recommended)"
    assert report.metrics["TDS"].score is None
    assert report.metrics["TDS"].status == "Not measured"


def test_report_flags_missing_water(config):
    report = build_report(_readings(), config)
    water = report.categories["water"]
    assert water.insufficient_data
    assert water.score is INSUFFICIENT_DATA
    assert water.label == "Not enough data"
    assert report.insufficient_categories == ["water"]
    assert report.overall is not INSUFFICIENT_DATA


def test_report_scores(config):
    report = build_report(_readings(), config)
    # CO2 1300 -> 55, PM25 21 -> 57: air = 56
    assert report.categories["air"].score == 56
    assert report.categories["air"].label == "Poor"
    # MagField 1.0 -> 100, RF 0.05 -> 100
    assert report.categories["ether"].score == 100
    # (56 * 0.45 + 100 * 0.20) / 0.65 = 69.54
    assert report.overall == 70
    assert report.overall_label == "Fair"


def test_report_collects_skipped_readings(config):
    report = build_report(_readings(), config)
    assert [item.reading.metric_key for item in report.skipped] == ["Radon"]


def test_report_rooms(config):
    report = build_report(_readings(), config)
    rooms = {room.room_id: room for room in report.rooms}
    assert list(rooms) == ["bedroom", "kitchen", None]
    assert rooms["bedroom"].values["CO2"] == 900
    # CO2 900 -> 90, PM25 7 -> 100
    assert rooms["bedroom"].categories["air"] == 95
    assert rooms["kitchen"].reading_count == 3
    assert rooms["kitchen"].categories["ether"] is INSUFFICIENT_DATA
    assert rooms[None].categories["ether"] == 100


def test_report_comparisons(config):
    report = build_report(_readings(), config, baselines_for("houston"))
    assert report.comparisons["PM25"] == [("Your Home", 21), ("Houston Avg", 12.0), ("Target", 9.0)]
    assert report.comparisons["PM10"][0] == ("Your Home", None)
    assert "TDS" not in report.comparisons


def test_empty_report(config):
    report = build_report([], config)
    assert report.overall is INSUFFICIENT_DATA
    assert report.overall_label == "Not enough data"
    assert report.insufficient_categories == ["air", "water", "ether"]
    assert report.rooms == []
