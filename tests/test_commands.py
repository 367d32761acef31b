"""Tests for file-level merge, invert, decimate and info operations."""
import pytest


def _gpx(*segments, name="track"):
    """GPX 1.1 text with one track; each segment is a list of (lat, lon)."""
    body = "".join(
        "<trkseg>" + "".join(f'<trkpt lat="{lat}" lon="{lon}"></trkpt>' for lat, lon in seg) + "</trkseg>"
        for seg in segments
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">'
        f"<trk><name>{name}</name>{body}</trk></gpx>"
    )


def _write(path, *segments):
    path.write_text(_gpx(*segments), encoding="utf-8")
    return path


def _coords(path):
    from merge_my_gpx.core.gpx import load_gpx
    return [[(p.lat, p.lon) for p in s.points] for t in load_gpx(path).tracks for s in t.segments]


class TestMerge:
    def test_merge_files_in_given_order(self, tmp_path):
        from merge_my_gpx.commands import merge_files
        a = _write(tmp_path / "a.gpx", [(0, 0), (0, 1)])
        b = _write(tmp_path / "b.gpx", [(1, 1), (1, 2)])
        out = merge_files([b, a], tmp_path / "out.gpx")
        assert _coords(out) == [[(1, 1), (1, 2), (0, 0), (0, 1)]]

    def test_merged_file_has_creator(self, tmp_path):
        from merge_my_gpx.commands import merge_files
        a = _write(tmp_path / "a.gpx", [(0, 0)])
        out = merge_files([a], tmp_path / "out.gpx")
        assert "merge-my-gpx v" in out.read_text(encoding="utf-8")

    def test_merge_all_sorted_by_name(self, tmp_path):
        from merge_my_gpx.commands import merge_all
        _write(tmp_path / "2-second.gpx", [(1, 1)])
        _write(tmp_path / "1-first.gpx", [(0, 0)])
        out = merge_all(tmp_path)
        assert out == tmp_path / "merged.gpx"
        assert _coords(out) == [[(0, 0), (1, 1)]]

    def test_merge_all_rerun_ignores_previous_output(self, tmp_path):
        from merge_my_gpx.commands import merge_all
        _write(tmp_path / "a.gpx", [(0, 0)])
        _write(tmp_path / "b.gpx", [(1, 1)])
        merge_all(tmp_path)
        out = merge_all(tmp_path)
        assert _coords(out) == [[(0, 0), (1, 1)]]

    def test_merge_all_empty_directory(self, tmp_path):
        from merge_my_gpx.commands import merge_all
        assert merge_all(tmp_path) is None
        assert not (tmp_path / "merged.gpx").exists()

    def test_merge_all_missing_directory(self, tmp_path):
        from merge_my_gpx.commands import merge_all
        from merge_my_gpx.errors import InputFileError
        with pytest.raises(InputFileError):
            merge_all(tmp_path / "missing")

    def test_merge_files_without_points(self, tmp_path):
        from merge_my_gpx.commands import merge_files
        from merge_my_gpx.errors import EmptyInput
        a = _write(tmp_path / "a.gpx", [])
        with pytest.raises(EmptyInput):
            merge_files([a], tmp_path / "out.gpx")
        assert not (tmp_path / "out.gpx").exists()


class TestInvert:
    def test_invert_files_writes_sibling(self, tmp_path):
        from merge_my_gpx.commands import invert_files
        a = _write(tmp_path / "a.gpx", [(0, 0), (0, 1), (0, 2)], [(5, 5), (5, 6)])
        [out] = invert_files([a])
        assert out == tmp_path / "a-inverted.gpx"
        assert _coords(out) == [[(0, 2), (0, 1), (0, 0)], [(5, 6), (5, 5)]]

    def test_invert_all_skips_previous_outputs(self, tmp_path):
        from merge_my_gpx.commands import invert_all
        _write(tmp_path / "a.gpx", [(0, 0), (0, 1)])
        _write(tmp_path / "b.gpx", [(1, 0), (1, 1)])
        first = invert_all(tmp_path)
        second = invert_all(tmp_path)
        assert [p.name for p in first] == ["a-inverted.gpx", "b-inverted.gpx"]
        assert second == first
        assert not (tmp_path / "a-inverted-inverted.gpx").exists()

    def test_invert_all_empty_directory(self, tmp_path):
        from merge_my_gpx.commands import invert_all
        assert invert_all(tmp_path) == []


class TestDecimate:
    def test_decimate_files(self, tmp_path):
        from merge_my_gpx.commands import decimate_files
        from merge_my_gpx.models import DecimationPolicy
        a = _write(tmp_path / "a.gpx", [(0, i) for i in range(5)])
        [out] = decimate_files([a], DecimationPolicy(factor=2))
        assert out == tmp_path / "a-decimated.gpx"
        assert _coords(out) == [[(0, 0), (0, 2), (0, 4)]]

    def test_decimate_invalid_policy_writes_nothing(self, tmp_path):
        from merge_my_gpx.commands import decimate_files
        from merge_my_gpx.errors import InvalidPolicy
        from merge_my_gpx.models import DecimationPolicy
        a = _write(tmp_path / "a.gpx", [(0, i) for i in range(5)])
        with pytest.raises(InvalidPolicy):
            decimate_files([a], DecimationPolicy(factor=1))
        assert not (tmp_path / "a-decimated.gpx").exists()


class TestInfo:
    def test_info_files(self, tmp_path):
        from merge_my_gpx.commands import info_files
        a = _write(tmp_path / "a.gpx", [(0, 0), (0, 1)], [(1, 1)])
        [(path, stats)] = info_files([a])
        assert path == a
        assert stats.point_count == 3
        assert stats.tracks[0].name == "track"
        assert stats.tracks[0].segment_point_counts == [2, 1]
        assert stats.distance_m > 0

    def test_info_invalid_gpx(self, tmp_path):
        from merge_my_gpx.commands import info_files
        from merge_my_gpx.errors import ParseError
        bad = tmp_path / "bad.gpx"
        bad.write_text("<gpx")
        with pytest.raises(ParseError):
            info_files([bad])
