import io
import tempfile
import unittest
from pathlib import Path

from app.services.exercise_import import (convert_file, convert_rows, read_source,
                                          to_exercise_mappings, write_import_csv)

SOURCE = (
    "Exercise Name,Video URL\n"
    "Back Squat,https://videos.example.com/squat.mp4\n"
    '"Press, Overhead",https://videos.example.com/press.mp4\n'
    "Plank,\n"
)


class TestExerciseImport(unittest.TestCase):
    def test_rows_are_numbered_from_one(self):
        rows = read_source(io.StringIO(SOURCE))

        self.assertEqual([row["id"] for row in rows], ["1", "2", "3"])
        self.assertEqual(rows[1]["name"], "Press, Overhead")
        self.assertEqual(rows[2]["video_url"], "")

    def test_output_quotes_fields(self):
        rows = read_source(io.StringIO(SOURCE))
        out = io.StringIO()

        write_import_csv(rows, out)

        lines = out.getvalue().splitlines()
        self.assertEqual(lines[0], '"id","name","video_url"')
        self.assertEqual(lines[2], '"2","Press, Overhead","https://videos.example.com/press.mp4"')

    def test_values_are_trimmed_and_missing_columns_tolerated(self):
        rows = convert_rows([{"Exercise Name": "  Row  "}])

        self.assertEqual(rows, [{"id": "1", "name": "Row", "video_url": ""}])

    def test_mappings_turn_empty_urls_into_null(self):
        rows = read_source(io.StringIO(SOURCE))

        mappings = to_exercise_mappings(rows)

        self.assertIsNone(mappings[2]["video_url"])
        self.assertEqual(mappings[0]["video_url"], "https://videos.example.com/squat.mp4")

    def test_convert_file_round_trip_on_disk(self):
        with tempfile.TemporaryDirectory() as tmp:
            source = Path(tmp) / "exercises.csv"
            target = Path(tmp) / "exercises-import.csv"
            source.write_text(SOURCE, encoding="utf-8")

            rows = convert_file(source, target)

            self.assertEqual(len(rows), 3)
            self.assertTrue(target.read_text(encoding="utf-8").startswith('"id","name","video_url"\n'))


if __name__ == "__main__":
    unittest.main()
