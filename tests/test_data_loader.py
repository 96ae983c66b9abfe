from pathlib import Path

import pytest

from raffle_assistant.data_loader import load_participants_from_csv, parse_random_count


class TestSampleDataFile:
    SAMPLE_PATH = Path(__file__).parent.parent / "data" / "sample_participants.csv"

    def test_sample_participants_integrity(self):
        entries = load_participants_from_csv(self.SAMPLE_PATH)
        assert entries == [
            ("Alice", "1,2", 1),
            ("Bob", "5-7", 2),
            ("Carol", "", 3),
            ('Dan "The Man"', "10", 0),
        ]


class TestParseRandomCount:
    def test_blank_is_zero(self):
        assert parse_random_count("  ", "row 2") == 0

    def test_number(self):
        assert parse_random_count(" 4 ", "row 2") == 4

    def test_invalid_raises(self):
        with pytest.raises(ValueError, match="Invalid random count 'two' for row 2"):
            parse_random_count("two", "row 2")

    def test_negative_raises(self):
        with pytest.raises(ValueError, match="cannot be negative"):
            parse_random_count("-1", "row 2")


class TestLoadParticipantsFromCSV:
    @pytest.fixture
    def sample_csv(self, tmp_path: Path) -> Path:
        csv_content = """Name,Fixed,Random
Ann,1 3 5-8,2
Bob,,
Cid,abc,1
"""
        csv_path = tmp_path / "participants.csv"
        csv_path.write_text(csv_content)
        return csv_path

    def test_returns_entries_in_file_order(self, sample_csv: Path):
        entries = load_participants_from_csv(str(sample_csv))
        assert [name for name, _, _ in entries] == ["Ann", "Bob", "Cid"]

    def test_fixed_text_is_unparsed(self, sample_csv: Path):
        entries = load_participants_from_csv(sample_csv)
        assert entries[0][1] == "1 3 5-8"
        assert entries[2][1] == "abc"

    def test_blank_cells_default(self, sample_csv: Path):
        entries = load_participants_from_csv(sample_csv)
        assert entries[1] == ("Bob", "", 0)

    def test_name_only_csv(self, tmp_path: Path):
        csv_path = tmp_path / "names.csv"
        csv_path.write_text("name\nAnn\nBob\n")
        assert load_participants_from_csv(csv_path) == [("Ann", "", 0), ("Bob", "", 0)]


class TestCSVValidation:
    def test_empty_csv_raises_error(self, tmp_path: Path):
        csv_path = tmp_path / "empty.csv"
        csv_path.write_text("")

        with pytest.raises(ValueError, match="empty"):
            load_participants_from_csv(csv_path)

    def test_headers_only_raises_error(self, tmp_path: Path):
        csv_path = tmp_path / "headers_only.csv"
        csv_path.write_text("name,fixed,random\n")

        with pytest.raises(ValueError, match="no data rows"):
            load_participants_from_csv(csv_path)

    def test_missing_name_column_raises_error(self, tmp_path: Path):
        csv_path = tmp_path / "no_name.csv"
        csv_path.write_text("fixed,random\n1,2\n")

        with pytest.raises(ValueError, match="missing required column"):
            load_participants_from_csv(csv_path)

    def test_blank_name_raises_error(self, tmp_path: Path):
        csv_path = tmp_path / "blank.csv"
        csv_path.write_text("name,fixed,random\nAnn,1,0\n  ,2,0\n")

        with pytest.raises(ValueError, match="Blank participant name on row 3"):
            load_participants_from_csv(csv_path)

    def test_bad_random_count_names_participant(self, tmp_path: Path):
        csv_path = tmp_path / "bad_random.csv"
        csv_path.write_text("name,fixed,random\nAnn,1,lots\n")

        with pytest.raises(ValueError, match="'Ann' \\(row 2\\)"):
            load_participants_from_csv(csv_path)
