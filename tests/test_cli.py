"""Tests for the command line entry points."""

import sys

import pytest

from income_fund_sim import chart_cli, cli, monte_carlo_cli


@pytest.fixture
def run_main(monkeypatch, tmp_path):
    """Run a CLI main() with argv inside an empty working directory."""
    monkeypatch.chdir(tmp_path)

    def _run(module, *argv):
        monkeypatch.setattr(sys, "argv", [module.__name__, *argv])
        module.main()

    return _run


class TestProjectionCli:
    def test_writes_csv(self, run_main, tmp_path, capsys):
        run_main(cli, "-y", "3", "--seed", "1")
        out_path = tmp_path / "reports" / "output.csv"
        lines = out_path.read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1 + 3 * 12
        assert lines[0].startswith("age,month,salaryIncome")
        captured = capsys.readouterr()
        assert "Final balance" in captured.out
        assert "output.csv" in captured.err

    def test_custom_output(self, run_main, tmp_path):
        run_main(cli, "-y", "1", "--output", "ledger/run.csv")
        assert (tmp_path / "ledger" / "run.csv").exists()

    def test_seed_reproducible(self, run_main, tmp_path):
        run_main(cli, "-y", "4", "--seed", "9", "--output", "a.csv")
        run_main(cli, "-y", "4", "--seed", "9", "--output", "b.csv")
        assert (tmp_path / "a.csv").read_bytes() == (tmp_path / "b.csv").read_bytes()

    def test_config_file(self, run_main, tmp_path):
        (tmp_path / "config.toml").write_text("years = 2\nstartingAge = 50\n", encoding="utf-8")
        run_main(cli, "--seed", "1")
        lines = (tmp_path / "reports" / "output.csv").read_text(encoding="utf-8").splitlines()
        assert len(lines) == 1 + 24
        assert lines[1].startswith("50,1,")
        assert lines[-1].startswith("51,12,")

    def test_invalid_years(self, run_main, capsys):
        with pytest.raises(SystemExit) as exc:
            run_main(cli, "-y", "0")
        assert exc.value.code == 2
        assert "years" in capsys.readouterr().err

    def test_export_failure_exits_nonzero(self, run_main, tmp_path):
        (tmp_path / "taken").mkdir()
        with pytest.raises(SystemExit) as exc:
            run_main(cli, "-y", "1", "--output", "taken")
        assert exc.value.code == 1


class TestMonteCarloCli:
    def test_prints_table(self, run_main, capsys):
        run_main(monte_carlo_cli, "-y", "2", "--mc-runs", "20")
        out = capsys.readouterr().out
        assert "P50" in out
        assert "N=20" in out


class TestChartCli:
    def test_writes_charts(self, run_main, tmp_path):
        run_main(chart_cli, "-y", "2", "--mc-runs", "10", "--output", "charts", "--name", "t")
        charts = tmp_path / "charts"
        assert (charts / "trajectory-t.png").exists()
        assert (charts / "cashflow-t.png").exists()
        assert (charts / "mc_fan-t.png").exists()

    def test_no_mc(self, run_main, tmp_path):
        run_main(chart_cli, "-y", "1", "--no-mc", "--output", "charts")
        assert not (tmp_path / "charts" / "mc_fan.png").exists()
        assert (tmp_path / "charts" / "trajectory.png").exists()


class TestCountValidation:
    def test_chart_cli_zero_runs_rejected_before_work(self, run_main, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            run_main(chart_cli, "-y", "1", "--mc-runs", "0", "--output", "charts")
        assert exc.value.code == 2
        assert "--mc-runs" in capsys.readouterr().err
        assert not (tmp_path / "charts").exists()

    def test_chart_cli_negative_runs(self, run_main):
        with pytest.raises(SystemExit) as exc:
            run_main(chart_cli, "-y", "1", "--mc-runs", "-5")
        assert exc.value.code == 2

    def test_monte_carlo_cli_zero_runs(self, run_main, capsys):
        with pytest.raises(SystemExit) as exc:
            run_main(monte_carlo_cli, "-y", "1", "--mc-runs", "0")
        assert exc.value.code == 2
        assert "must be positive" in capsys.readouterr().err

    def test_projection_cli_zero_log_every(self, run_main, tmp_path):
        with pytest.raises(SystemExit) as exc:
            run_main(cli, "-y", "1", "--log-every", "0")
        assert exc.value.code == 2
        assert not (tmp_path / "reports").exists()
