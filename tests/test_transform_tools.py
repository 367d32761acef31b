"""Tests for the MCP transform and info tools."""
import json
from unittest.mock import MagicMock

GPX = (
    '<?xml version="1.0" encoding="UTF-8"?>'
    '<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">'
    "<trk><name>Ride</name><trkseg>"
    '<trkpt lat="0" lon="0"></trkpt><trkpt lat="0" lon="1"></trkpt>'
    '<trkpt lat="0" lon="2"></trkpt><trkpt lat="0" lon="3"></trkpt>'
    "</trkseg></trk></gpx>"
)


def _get_tools():
    from merge_my_gpx.tools.transform import register_transform_tools
    from merge_my_gpx.tools.info import register_info_tools
    tools = {}
    mock_mcp = MagicMock()
    def capture(**kwargs):
        def decorator(fn):
            tools[fn.__name__] = fn
            return fn
        return decorator
    mock_mcp.tool = capture
    register_transform_tools(mock_mcp)
    register_info_tools(mock_mcp)
    return tools


def _write(path):
    path.write_text(GPX, encoding="utf-8")
    return str(path)


def test_all_tools_registered():
    assert set(_get_tools()) == {
        "merge_gpx", "merge_gpx_directory", "invert_gpx",
        "invert_gpx_directory", "decimate_gpx", "gpx_info",
    }


def test_merge_gpx_defaults_next_to_first_file(tmp_path):
    tools = _get_tools()
    a = _write(tmp_path / "a.gpx")
    b = _write(tmp_path / "b.gpx")
    result = tools["merge_gpx"](files=[a, b])
    assert "merged" in result.lower()
    assert (tmp_path / "merged.gpx").exists()


def test_merge_gpx_no_files():
    result = _get_tools()["merge_gpx"](files=[])
    assert result.startswith("Error:")


def test_merge_gpx_directory_empty(tmp_path):
    result = _get_tools()["merge_gpx_directory"](directory=str(tmp_path))
    assert "no gpx files" in result.lower()


def test_invert_gpx(tmp_path):
    result = _get_tools()["invert_gpx"](files=[_write(tmp_path / "a.gpx")])
    assert "a-inverted.gpx" in result


def test_invert_gpx_directory(tmp_path):
    _write(tmp_path / "a.gpx")
    result = _get_tools()["invert_gpx_directory"](directory=str(tmp_path))
    assert "Inverted 1 file(s)" in result


def test_decimate_gpx_invalid_policy(tmp_path):
    result = _get_tools()["decimate_gpx"](files=[_write(tmp_path / "a.gpx")], factor=1)
    assert result.startswith("Error:")


def test_decimate_gpx(tmp_path):
    result = _get_tools()["decimate_gpx"](files=[_write(tmp_path / "a.gpx")], target_max_points=2)
    assert "a-decimated.gpx" in result


def test_gpx_info_returns_json(tmp_path):
    a = _write(tmp_path / "a.gpx")
    data = json.loads(_get_tools()["gpx_info"](files=[a]))
    assert data[0]["file"] == a
    assert data[0]["point_count"] == 4
    assert data[0]["tracks"][0]["name"] == "Ride"
    assert data[0]["time_span"] is None


def test_gpx_info_missing_file(tmp_path):
    result = _get_tools()["gpx_info"](files=[str(tmp_path / "missing.gpx")])
    assert result.startswith("Error:")
