"""Tests for the CLI entry point and output module."""

import random
from pathlib import Path

import pytest
from typer.testing import CliRunner

from raffle_assistant.main import app
from raffle_assistant.output import (
    export_csv,
    export_filename,
    export_rows,
    print_raffle_summary,
    to_csv,
    write_export,
)
from raffle_assistant.session import add_participant, assign_randoms, new_state

runner = CliRunner()

SAMPLE_CSV = Path(__file__).parent.parent / "data" / "sample_participants.csv"


class TestCLI:
    """Tests for the CLI commands."""

    def test_cli_runs_with_sample_data(self):
        result = runner.invoke(app, [str(SAMPLE_CSV), "-n", "12"])
        assert result.exit_code == 0
        assert "Raffle: 12 spots (Assigned)" in result.output
        assert "Filled: 12" in result.output
        assert "Unfilled: 0" in result.output

    def test_cli_no_assign_shows_fixed_only(self):
        result = runner.invoke(app, [str(SAMPLE_CSV), "-n", "12", "--no-assign"])
        assert result.exit_code == 0
        assert "Fixed picks only" in result.output
        assert "Filled: 6" in result.output

    def test_cli_with_seed_is_reproducible(self):
        result1 = runner.invoke(app, [str(SAMPLE_CSV), "-n", "30", "-s", "42"])
        result2 = runner.invoke(app, [str(SAMPLE_CSV), "-n", "30", "-s", "42"])
        assert result1.exit_code == 0
        assert result1.output == result2.output

    def test_cli_csv_export(self, tmp_path: Path):
        output_path = tmp_path / "spots.csv"
        result = runner.invoke(
            app, [str(SAMPLE_CSV), "-n", "12", "-o", str(output_path)]
        )
        assert result.exit_code == 0
        assert f"Spot list exported to: {output_path}" in result.output

        lines = output_path.read_text(encoding="utf-8").split("\n")
        assert lines[0] == "Spot #,Name"
        assert len(lines) == 13
        assert lines[1] == '1,"Alice"'
        assert lines[10] == '10,"Dan ""The Man"""'

    def test_cli_conflicts_exit_with_error(self, tmp_path: Path):
        csv_path = tmp_path / "conflict.csv"
        csv_path.write_text("name,fixed,random\nAnn,3,1\nBob,3,0\n")
        output_path = tmp_path / "spots.csv"

        result = runner.invoke(app, [str(csv_path), "-n", "5", "-o", str(output_path)])

        assert result.exit_code == 1
        assert "Conflicts detected" in result.output
        assert "Spot 3: first by Ann, later also chosen by Bob" in result.output
        # Export still falls back to the fixed picks
        assert output_path.read_text(encoding="utf-8") == (
            'Spot #,Name\n1,\n2,\n3,"Ann"\n4,\n5,'
        )

    def test_cli_conflicts_allowed_without_assign(self, tmp_path: Path):
        csv_path = tmp_path / "conflict.csv"
        csv_path.write_text("name,fixed,random\nAnn,3,1\nBob,3,0\n")
        result = runner.invoke(app, [str(csv_path), "-n", "5", "--no-assign"])
        assert result.exit_code == 0
        assert "Conflicts detected" in result.output

    def test_cli_file_not_found(self):
        result = runner.invoke(app, ["nonexistent_file.csv"])
        assert result.exit_code == 1
        assert "Error: File not found" in result.output

    def test_cli_malformed_csv(self, tmp_path: Path):
        csv_path = tmp_path / "bad.csv"
        csv_path.write_text("who,fixed\nAnn,1\n")
        result = runner.invoke(app, [str(csv_path)])
        assert result.exit_code == 1
        assert "missing required column" in result.output

    def test_cli_rejects_zero_spots(self):
        result = runner.invoke(app, [str(SAMPLE_CSV), "-n", "0"])
        assert result.exit_code != 0

    def test_cli_help(self):
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "--total-spots" in result.output
        assert "--seed" in result.output
        assert "--no-assign" in result.output
        assert "--output" in result.output
        assert "--verbose" in result.output


class TestOutput:
    """Tests for the output module."""

    def test_to_csv_quotes_names(self):
        rows = [(1, "Ann"), (2, ""), (3, 'Say "hi"'), (4, "Smith, J")]
        assert to_csv(rows) == (
            'Spot #,Name\n1,"Ann"\n2,\n3,"Say ""hi"""\n4,"Smith, J"'
        )

    def test_to_csv_header_only(self):
        assert to_csv([]) == "Spot #,Name"

    def test_export_is_byte_reproducible(self):
        state = add_participant(new_state(4), "Ann", "2")
        assert export_csv(state) == export_csv(state)
        assert export_csv(state).encode() == b'Spot #,Name\n1,\n2,"Ann"\n3,\n4,'

    def test_export_rows_cover_every_spot(self):
        state = add_participant(new_state(3), "Ann", "3", 1)
        state = assign_randoms(state, random.Random(0))
        rows = export_rows(state)
        assert [spot for spot, _ in rows] == [1, 2, 3]
        assert rows[2] == (3, "Ann")
        assert [name for _, name in rows].count("Ann") == 2

    def test_export_filename(self):
        assert export_filename(100) == "raffle_100_spots.csv"

    def test_write_export(self, tmp_path: Path):
        state = add_participant(new_state(2), "Ann", "1")
        filepath = tmp_path / "out.csv"
        write_export(state, filepath)
        assert filepath.read_text(encoding="utf-8") == 'Spot #,Name\n1,"Ann"\n2,'

    def test_write_export_to_invalid_path_raises_error(self):
        with pytest.raises(OSError, match="Failed to write"):
            write_export(new_state(2), "/nonexistent/directory/file.csv")

    def test_print_raffle_summary(self, capsys):
        state = new_state(6)
        state = add_participant(state, "Ann", "1", 0, participant_id="a")
        state = add_participant(state, "Bob", "", 2, participant_id="b")
        state = assign_randoms(state, random.Random(0))

        print_raffle_summary(state)
        captured = capsys.readouterr()

        assert "Raffle: 6 spots (Assigned)" in captured.out
        assert "Participants: 2" in captured.out
        assert "Filled: 3" in captured.out
        assert "1. Ann | fixed: 1 | randoms: 0" in captured.out
        assert "2. Bob | fixed: — | randoms: 2 (" in captured.out
        assert "1: Ann" in captured.out

    def test_print_raffle_summary_with_conflicts(self, capsys):
        state = add_participant(new_state(3), "Ann", "2")
        state = add_participant(state, "Bob", "2")

        print_raffle_summary(state)
        captured = capsys.readouterr()

        assert "Conflicts detected" in captured.out
        assert "Spot 2: first by Ann, later also chosen by Bob" in captured.out
