import json

import pytest

from panegrid.cli import main
from panegrid.grid import compute_grid_layout
from panegrid.models import Container, PaneSpec
from panegrid.preview import BACKGROUND, render_layout
from panegrid.smart import compute_smart_layout, evaluate_strategies
from panegrid.utils.serialization import layout_to_dict, strategy_summary


def test_grid_layout_json_has_rows_and_cols():
    layout = compute_grid_layout(Container(1920, 1080), [PaneSpec("a"), PaneSpec("b")])
    data = layout_to_dict(layout)
    assert data["mode"] == "grid"
    assert [(c["row"], c["col"]) for c in data["cells"]] == [(0, 0), (0, 1)]
    assert "z_index" not in data["cells"][0]
    assert data["cell_width"] == 960.0


def test_smart_layout_json_has_z_index_and_strategy():
    panes = [PaneSpec("a", 16 / 9), PaneSpec("b", 4 / 3), PaneSpec("c", 1.0)]
    data = layout_to_dict(compute_smart_layout(Container(1920, 1080), panes))
    assert data["mode"] == "smart"
    assert data["strategy"] in {"overlap", "horizontal", "vertical", "mosaic", "diagonal"}
    assert all("z_index" in c for c in data["cells"])
    json.dumps(data)


def test_preview_draws_panes_and_honours_skip():
    container = Container(320, 180)
    panes = [PaneSpec("solo", 16 / 9)]
    layout = compute_grid_layout(container, panes)
    image = render_layout(container, layout, panes)
    assert image.size == (320, 180)
    assert image.getpixel((160, 90)) != BACKGROUND

    skipped = render_layout(container, layout, panes, skip={"solo"})
    assert skipped.getpixel((160, 90)) == BACKGROUND


def test_cli_writes_layout_and_preview(tmp_path, capsys):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({
        "container": {"width": 640, "height": 360},
        "panes": [{"id": 1, "aspect_ratio": "16:9"}, {"id": 2, "aspect_ratio": 1.0}, {"id": 3}],
    }), encoding="utf-8")
    out = tmp_path / "out" / "layout.json"
    preview = tmp_path / "preview.png"

    code = main([str(request), "--mode", "smart", "--output", str(out), "--preview", str(preview), "--verbose"])
    assert code == 0
    data = json.loads(out.read_text(encoding="utf-8"))
    assert sorted(c["pane_id"] for c in data["cells"]) == [1, 2, 3]
    assert preview.exists()
    err = capsys.readouterr().err
    assert "[smart] overlap:" in err


def test_cli_prints_json_to_stdout(tmp_path, capsys):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"container": {"width": 100, "height": 100}, "panes": []}), encoding="utf-8")
    assert main([str(request)]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["cells"] == [] and data["rows"] == 0


def test_cli_rejects_bad_request(tmp_path):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({"container": {"width": -1, "height": 100}}), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main([str(request)])
    assert exc.value.code == 2


def test_cli_rejects_badly_typed_config(tmp_path):
    request = tmp_path / "request.json"
    request.write_text(json.dumps({
        "container": {"width": 640, "height": 360},
        "panes": [{"id": "a"}, {"id": "b"}],
    }), encoding="utf-8")
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"base_score": "high"}), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main([str(request), "--mode", "smart", "--config", str(config)])
    assert exc.value.code == 2


def test_strategy_summary_lists_every_strategy_in_order():
    panes = [PaneSpec("a", 16 / 9), PaneSpec("b", 1.0)]
    rows = strategy_summary(evaluate_strategies(Container(1280, 720), panes))
    assert [r["strategy"] for r in rows] == ["overlap", "horizontal", "vertical", "mosaic", "diagonal"]
    assert all(0 < r["efficiency"] <= 1 for r in rows)
    json.dumps(rows)
