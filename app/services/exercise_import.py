"""
Conversion of the exercise library CSV export into database import rows.

The source file has "Exercise Name" and "Video URL" columns; the output has
the exercises table columns id, name and video_url with IDs numbered 1..N.
"""
import csv
from pathlib import Path
from typing import Dict, Iterable, List, TextIO

SOURCE_NAME_COLUMN = "Exercise Name"
SOURCE_VIDEO_COLUMN = "Video URL"
OUTPUT_COLUMNS = ["id", "name", "video_url"]


def convert_rows(records: Iterable[Dict[str, str]]) -> List[Dict[str, str]]:
    rows: List[Dict[str, str]] = []
    for record in records:
        name = (record.get(SOURCE_NAME_COLUMN) or "").strip()
        video_url = (record.get(SOURCE_VIDEO_COLUMN) or "").strip()
        rows.append({"id": str(len(rows) + 1), "name": name, "video_url": video_url})
    return rows


def read_source(handle: TextIO) -> List[Dict[str, str]]:
    # Short rows are padded with None by DictReader
    return convert_rows(csv.DictReader(handle))


def write_import_csv(rows: List[Dict[str, str]], handle: TextIO) -> None:
    # Every field is quoted so commas inside exercise names survive
    writer = csv.DictWriter(handle, fieldnames=OUTPUT_COLUMNS, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writeheader()
    writer.writerows(rows)


def convert_file(input_path: Path, output_path: Path) -> List[Dict[str, str]]:
    """
    Convert the source CSV at input_path into an import CSV at output_path.

    Returns:
        The converted rows
    """
    with input_path.open("r", encoding="utf-8", newline="") as source:
        rows = read_source(source)
    with output_path.open("w", encoding="utf-8", newline="") as target:
        write_import_csv(rows, target)
    return rows


def to_exercise_mappings(rows: List[Dict[str, str]]) -> List[Dict[str, object]]:
    """Rows shaped for ExerciseRepository.bulk_insert; empty URLs become NULL."""
    return [
        {"id": row["id"], "name": row["name"], "video_url": row["video_url"] or None}
        for row in rows
    ]
