import pytest

import main


def feed(monkeypatch, *answers):
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_bad_cycle_count_exits_quietly(monkeypatch, capsys):
    feed(monkeypatch, "abc")
    assert main.main() == 0
    out = capsys.readouterr().out
    assert "Simulation finished." not in out
    assert "Invalid" not in out


def test_manual_mode(monkeypatch, capsys):
    feed(monkeypatch, "2", "1", "0", "75", "25", "n")
    assert main.main() == 0
    out = capsys.readouterr().out
    assert out.count("North-South -> GREEN (will last 31s)") == 2
    assert "East-West -> GREEN (will last 14s)" in out
    assert "Cycles Run: 2" in out
    assert "Simulation finished." in out


def test_random_mode(monkeypatch, capsys):
    feed(monkeypatch, "3", "2", "0", "n")
    assert main.main() == 0
    out = capsys.readouterr().out
    assert "=== Cycle 3 ===" in out
    assert "Simulation finished." in out


def test_negative_density_is_reported(monkeypatch, capsys):
    feed(monkeypatch, "1", "1", "0", "-5", "10")
    assert main.main() == 1
    assert "Invalid input" in capsys.readouterr().out


def test_negative_cycle_count_is_reported(monkeypatch, capsys):
    feed(monkeypatch, "-2", "1", "0")
    assert main.main() == 1
    assert "Invalid input" in capsys.readouterr().out


def test_saving_outputs(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    feed(monkeypatch, "1", "1", "0", "40", "60", "y")
    assert main.main() == 0
    assert (tmp_path / "signal_events.csv").exists()
    assert (tmp_path / "signal_timeline.png").exists()


def test_densities_from_csv(monkeypatch, tmp_path, capsys):
    path = tmp_path / "densities.csv"
    path.write_text("first_density,second_density\n75,25\n0,0\n")
    feed(monkeypatch, "2", "3", "0", str(path), "n")
    assert main.main() == 0
    out = capsys.readouterr().out
    assert "North-South -> GREEN (will last 31s)" in out
    assert "North-South -> GREEN (will last 5s)" in out
    assert "Cycles Run: 2" in out


def test_missing_densities_file_is_reported(monkeypatch, tmp_path, capsys):
    feed(monkeypatch, "1", "3", "0", str(tmp_path / "nope.csv"))
    assert main.main() == 1
    assert "Invalid input: cannot read densities file" in capsys.readouterr().out


def test_densities_file_without_columns_is_reported(monkeypatch, tmp_path, capsys):
    path = tmp_path / "densities.csv"
    path.write_text("north,east\n1,2\n")
    feed(monkeypatch, "1", "3", "0", str(path))
    assert main.main() == 1
    assert "missing column" in capsys.readouterr().out


def test_too_few_scripted_densities_is_reported(monkeypatch, tmp_path, capsys):
    path = tmp_path / "densities.csv"
    path.write_text("first_density,second_density\n1,2\n")
    feed(monkeypatch, "2", "3", "0", str(path))
    assert main.main() == 1
    assert "No scripted densities for cycle 2" in capsys.readouterr().out


def test_non_numeric_density_is_reported(monkeypatch, capsys):
    feed(monkeypatch, "1", "1", "0", "lots", "10")
    assert main.main() == 1
    assert "Invalid input: densities must be whole numbers." in capsys.readouterr().out


@pytest.mark.parametrize("answers", [("2",), ("2", "1")])
def test_end_of_input_at_mode_prompts_exits_quietly(monkeypatch, capsys, answers):
    feed(monkeypatch, *answers)
    assert main.main() == 0
    assert "Simulation finished." not in capsys.readouterr().out


def test_internal_errors_are_not_reported_as_bad_densities(monkeypatch):
    def broken_simulate(self, source, cycles=None):
        raise ValueError("North-South cannot change from RED to YELLOW")

    monkeypatch.setattr(main.IntersectionController, "simulate", broken_simulate)
    feed(monkeypatch, "1", "1", "0", "5", "5")
    with pytest.raises(ValueError, match="cannot change"):
        main.main()
