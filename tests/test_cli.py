import io

from airwatcher.cli import main


def _data(tmp_path):
    (tmp_path / "sensors.csv").write_text("Sensor0;44;1.1;\n", encoding="utf-8")
    (tmp_path / "measurements.csv").write_text(
        "2019-01-01 12:00:00;Sensor0;O3;50.25;\n", encoding="utf-8"
    )
    return str(tmp_path)


def test_quit_right_away(tmp_path, monkeypatch, capsys):
    folder = _data(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n0\n"))
    assert main(["--data", folder]) == 0
    assert "Au revoir !" in capsys.readouterr().out


def test_loaded_data_is_used(tmp_path, monkeypatch, capsys):
    folder = _data(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n2\n2\n44 1.1 1\n0\n0\n"))
    assert main(["--data", folder]) == 0
    assert "(44, 1.1) : 50.25" in capsys.readouterr().out


def test_missing_folder_reports_and_continues(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n2\n2\n44 1.1 1\n0\n0\n"))
    assert main(["--data", str(tmp_path / "absent")]) == 0
    captured = capsys.readouterr()
    assert captured.err.count("Unable to open file") == 2
    assert "Aucune mesure disponible pour cette position." in captured.out


def test_end_of_input_exits_cleanly(tmp_path, monkeypatch, capsys):
    folder = _data(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main(["--data", folder]) == 0
    assert "Vous avez sélectionné : 1" in capsys.readouterr().out