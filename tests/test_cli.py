"""Tests for the command line entry point."""

import json

from biathlon.cli import main


class TestMain:

    def test_success(self, race_files, capsys):
        config_path, events_path = race_files
        code = main(["--config", str(config_path), "--events", str(events_path)])
        out = capsys.readouterr().out

        assert code == 0
        assert out.splitlines()[0] == "[09:00:00.000] The competitor(1) registered"
        assert "Final results:" in out
        assert "00:10:00.000 Competitor 1: laps count 2" in out

    def test_quiet_summary(self, race_files, capsys):
        config_path, events_path = race_files
        code = main(["-c", str(config_path), "-e", str(events_path), "--quiet", "--summary"])
        out = capsys.readouterr().out

        assert code == 0
        assert "registered" not in out
        assert "RACE SUMMARY" in out

    def test_export(self, race_files, tmp_path, capsys):
        config_path, events_path = race_files
        out_dir = tmp_path / "exports"
        code = main([
            "-c", str(config_path), "-e", str(events_path),
            "--export", "--output-dir", str(out_dir),
        ])

        assert code == 0
        assert (out_dir / "results.csv").exists()
        data = json.loads((out_dir / "results.json").read_text())
        assert data["results"][0]["status"] == "finished"

    def test_missing_config_fails(self, tmp_path, race_files, capsys):
        _, events_path = race_files
        code = main(["-c", str(tmp_path / "missing.json"), "-e", str(events_path)])
        captured = capsys.readouterr()

        assert code == 1
        assert "Error:" in captured.err
        assert "Final results:" not in captured.out

    def test_unregistered_reference_fails(self, race_files, capsys):
        config_path, events_path = race_files
        with open(events_path, "a") as f:
            f.write("[10:11:00.000] 6 8 1\n")

        code = main(["-c", str(config_path), "-e", str(events_path)])

        assert code == 1
        assert "Competitor 8 is not registered" in capsys.readouterr().err
