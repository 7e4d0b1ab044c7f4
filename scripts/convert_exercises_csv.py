"""
Convert the exercise library CSV export into an import file for the exercises table.

Usage:
    python scripts/convert_exercises_csv.py exercises.csv exercises-import.csv [--import]
"""
import argparse
import logging
from pathlib import Path

from app.services.exercise_import import convert_file, to_exercise_mappings

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Convert an exercise CSV export to id,name,video_url rows.")
    parser.add_argument("input", type=Path, help="Source CSV with 'Exercise Name' and 'Video URL' columns")
    parser.add_argument("output", type=Path, help="Where to write the converted CSV")
    parser.add_argument("--import", dest="do_import", action="store_true", help="Also insert the rows into the database")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    if not args.input.exists():
        raise SystemExit(f"Input file not found: {args.input}")

    rows = convert_file(args.input, args.output)
    print(f"Converted {len(rows)} exercise(s) to {args.output}")

    if args.do_import:
        from app.db.session import SessionLocal
        from app.repositories.exercise import ExerciseRepository

        db = SessionLocal()
        try:
            ExerciseRepository(db).bulk_insert(to_exercise_mappings(rows))
            logger.info("Imported %d exercises", len(rows))
        finally:
            db.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
