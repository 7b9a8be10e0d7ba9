import io
import json

from tilepath.cli import main


def write_map(path):
    doc = {
        "tilesets": [{"tilewidth": 3, "tileheight": 2}],
        "layers": [{"data": [0, -1, -1, 3, -1, 8]}],
    }
    path.write_text(json.dumps(doc))


def test_main_with_file_argument_writes_outputs(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write_map(tmp_path / "map.json")
    assert main(["map.json", "--no-pause"]) == 0
    coords = (tmp_path / "PathOutput.txt").read_text()
    visual = (tmp_path / "PathVisual.txt").read_text()
    assert coords.startswith("(X,Y) path coordinates \n")
    assert "LEGEND: \n" in visual
    out = capsys.readouterr().out
    assert coords in out
    assert visual in out


def test_main_prompt_defaults_to_default_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    write_map(tmp_path / "take_home_project.json")
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "take_home_project.json" in out
    assert (tmp_path / "PathOutput.txt").exists()


def test_main_missing_file_fails(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["nothing.json", "--no-pause"]) == 1
    assert "Could not open file" in capsys.readouterr().err
    assert not (tmp_path / "PathOutput.txt").exists()