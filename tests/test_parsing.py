"""Tests for per-record scan validation."""

from scanoverlay.core.parsing import parse_scan
from scanoverlay.models import OpeningCategory, ScanMetadata


class TestWallParsing:
    """Malformed walls are dropped one at a time, never the whole scan."""

    def test_short_transform_is_skipped(self, wall, transform):
        bad = {"dimensions": [3.0, 2.5, 0.1], "transform": transform()[:12], "identifier": "bad"}
        good = wall(4.0, 2.5, 0.1, identifier="good")

        scan, warnings = parse_scan(ScanMetadata(walls=[bad, good]))

        assert [w.wall_id for w in scan.walls] == ["good"]
        assert len(warnings) == 1
        assert warnings[0].code == "invalid_wall"
        assert warnings[0].element == "wall-0"
        assert warnings[0].field == "transform"
        assert warnings[0].skipped

    def test_bad_dimensions(self, transform):
        records = [
            {"dimensions": [3.0, 2.5], "transform": transform()},
            {"dimensions": [3.0, 2.5, -0.1], "transform": transform()},
            {"dimensions": ["3", 2.5, 0.1], "transform": transform()},
        ]

        scan, warnings = parse_scan(ScanMetadata(walls=records))

        assert scan.walls == []
        assert [w.field for w in warnings] == ["dimensions"] * 3
        assert [w.element for w in warnings] == ["wall-0", "wall-1", "wall-2"]

    def test_zero_dimensions_are_accepted(self, wall):
        scan, warnings = parse_scan(ScanMetadata(walls=[wall(0.0, 2.5, 0.0)]))

        assert len(scan.walls) == 1
        assert warnings == []

    def test_non_finite_transform(self, transform):
        values = transform()
        values[12] = float("nan")

        scan, warnings = parse_scan(ScanMetadata(walls=[{"dimensions": [1, 1, 0], "transform": values}]))

        assert scan.walls == []
        assert warnings[0].field == "transform"

    def test_non_object_record(self, wall):
        scan, warnings = parse_scan(ScanMetadata(walls=[None, wall(1.0, 1.0, 0.1)]))

        assert len(scan.walls) == 1
        assert scan.walls[0].index == 1
        assert warnings[0].field == "record"

    def test_identifier_fallback(self, wall):
        scan, _ = parse_scan(ScanMetadata(walls=[wall(1.0, 1.0, 0.1), wall(2.0, 1.0, 0.1, identifier="x")]))

        assert [w.wall_id for w in scan.walls] == ["wall-0", "x"]

    def test_non_string_identifier_keeps_the_wall(self, wall):
        record = wall(3.0, 2.0, 0.0)
        record["identifier"] = 5

        scan, warnings = parse_scan(ScanMetadata(walls=[record]))

        assert [w.wall_id for w in scan.walls] == ["wall-0"]
        assert len(warnings) == 1
        assert warnings[0].code == "invalid_identifier"
        assert warnings[0].field == "identifier"
        assert not warnings[0].skipped

    def test_pose_is_decoded(self, wall):
        scan, _ = parse_scan(ScanMetadata(walls=[wall(1.0, 1.0, 0.1, x=2.0, y=1.0, z=-1.0)]))

        position = scan.walls[0].pose.position
        assert (position.x, position.y, position.z) == (2.0, 1.0, -1.0)


class TestOpeningParsing:
    """Doors and windows validate independently of each other."""

    def test_list_decides_category(self, opening):
        scan, warnings = parse_scan(ScanMetadata(
            doors=[opening("window")],
            windows=[{"transform": opening("window")["transform"]}],
        ))

        assert warnings == []
        assert scan.doors[0].category == OpeningCategory.DOOR
        assert scan.windows[0].category == OpeningCategory.WINDOW

    def test_malformed_opening_skipped(self, opening, transform):
        scan, warnings = parse_scan(ScanMetadata(
            doors=[{"transform": transform()[:15]}, opening("door", x=1.0)],
            windows=[{"transform": "not a matrix"}],
        ))

        assert len(scan.doors) == 1
        assert scan.doors[0].element_id == "door-1"
        assert scan.windows == []
        assert {(w.code, w.element) for w in warnings} == {
            ("invalid_door", "door-0"),
            ("invalid_window", "window-0"),
        }

    def test_absent_lists(self):
        scan, warnings = parse_scan(ScanMetadata())

        assert scan.walls == [] and scan.openings == []
        assert warnings == []
