"""Unit tests for the CSV exporter."""

from app.logbook.export import BOM, HEADERS, export_filename, to_csv
from app.models.training_log import TrainingLog

HEADER_LINE = "날짜,스트레칭(분),유산소(분),근력(분),기술(분),기타(분),총합(분)"


class TestToCsv:

    def test_empty_is_bom_and_header(self):
        assert to_csv([]) == BOM + HEADER_LINE

    def test_starts_with_utf8_bom(self):
        assert to_csv([]).encode("utf-8").startswith(b"\xef\xbb\xbf")

    def test_header_has_seven_columns(self):
        assert len(HEADERS) == 7
        assert ",".join(HEADERS) == HEADER_LINE

    def test_row_in_category_order(self):
        log = TrainingLog(id="u1_2024-06-03", user_id="u1", date="2024-06-03",
                          trainings={ "stretching": 10, "cardio": 30, "strength": 20, "skill": 5, "other": 1 },
                          total_duration=66)
        lines = to_csv([log]).split("\n")
        assert lines[1] == "2024-06-03,10,30,20,5,1,66"

    def test_missing_category_defaults_to_zero_and_total_is_recorded(self):
        log = { "date": "2024-06-04", "trainings": { "cardio": 30 }, "total_duration": 30 }
        lines = to_csv([log]).split("\n")
        assert lines[1] == "2024-06-04,0,30,0,0,0,30"

    def test_total_comes_from_record_not_recomputed(self):
        log = { "date": "2024-06-05", "trainings": { "cardio": 30 }, "total_duration": 45 }
        assert to_csv([log]).split("\n")[1].endswith(",45")

    def test_missing_trainings_and_total(self):
        assert to_csv([{ "date": "2024-06-06" }]).split("\n")[1] == "2024-06-06,0,0,0,0,0,0"

    def test_one_line_per_log_in_input_order(self):
        logs = [{ "date": d, "trainings": { }, "total_duration": 0 } for d in ("2024-06-09", "2024-06-03")]
        lines = to_csv(logs).split("\n")
        assert len(lines) == 3
        assert [line.split(",")[0] for line in lines[1:]] == ["2024-06-09", "2024-06-03"]


def test_export_filename():
    assert export_filename("홍길동") == "홍길동_훈련기록.csv"
