import csv
import io
import logging
import os
from typing import IO, Iterable, List, Tuple, Union

import pandas as pd

from .config import COURSES_PER_STUDENT
from .errors import MalformedInputError
from .scheduling.reporting import RosterRow, ScheduleRow, SlotRow

logger = logging.getLogger(__name__)

TextOrPath = Union[str, os.PathLike, IO]
Record = Tuple[str, List[str]]


def _open_text(src: TextOrPath):
    """Return a text-mode file handle and a flag indicating whether to close it.

    Accepts a filesystem path, a text IO object, or a BytesIO buffer.
    """
    if isinstance(src, (str, os.PathLike)):
        f = open(src, 'r', newline='')
        return f, True
    if isinstance(src, io.BytesIO):
        src.seek(0)
        f = io.TextIOWrapper(src, encoding='utf-8', newline='')
        return f, True
    if hasattr(src, 'read'):
        return src, False
    raise TypeError("Unsupported input type; expected path or file-like object")


def _content_lines(f) -> Iterable[str]:
    for line in f:
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        yield line


def read_enrollment_records(src: TextOrPath, courses_per_student: int = COURSES_PER_STUDENT) -> List[Record]:
    """Read a student line followed by ``courses_per_student`` course lines, repeatedly."""
    if courses_per_student < 1:
        raise ValueError("courses_per_student must be at least 1")
    records: List[Record] = []
    f, should_close = _open_text(src)
    try:
        # blank and comment lines are only allowed between records
        for name in _content_lines(f):
            courses = [line.strip() for _, line in zip(range(courses_per_student), f)]
            if len(courses) < courses_per_student:
                raise MalformedInputError(
                    f"student {name!r} lists {len(courses)} courses, expected {courses_per_student}"
                )
            if not all(courses):
                raise MalformedInputError(f"student {name!r} has a blank course line")
            records.append((name, courses))
    finally:
        if should_close:
            f.close()
    logger.info("read %d enrollment records", len(records))
    return records


def load_toronto_stu(src: TextOrPath) -> List[Record]:
    """One student per line, courses separated by whitespace; students are named stu_<n>."""
    records: List[Record] = []
    f, should_close = _open_text(src)
    try:
        for idx, line in enumerate(_content_lines(f)):
            records.append((f"stu_{idx}", line.replace('\t', ' ').split()))
    finally:
        if should_close:
            f.close()
    logger.info("read %d .stu records", len(records))
    return records


def load_enrollments_csv(src: TextOrPath) -> List[Record]:
    """Group ``student_id,course_id`` rows into one record per student, in first-seen order."""
    f, should_close = _open_text(src)
    try:
        df = pd.read_csv(f, dtype=str)
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise MalformedInputError(f"unreadable enrollment CSV: {e}") from e
    finally:
        if should_close:
            f.close()
    missing = {'student_id', 'course_id'} - set(df.columns)
    if missing:
        raise MalformedInputError(f"enrollment CSV is missing columns: {', '.join(sorted(missing))}")
    df = df.dropna(subset=['student_id', 'course_id'])
    df['student_id'] = df['student_id'].str.strip()
    df['course_id'] = df['course_id'].str.strip()
    grouped = df.groupby('student_id', sort=False)['course_id'].apply(list)
    records = [(sid, courses) for sid, courses in grouped.items()]
    logger.info("read %d students from enrollment CSV", len(records))
    return records


def save_slots_csv(path: str, rows: List[SlotRow]):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f)
        w.writerow(['slot', 'course'])
        for slot, names in rows:
            for name in names:
                w.writerow([slot + 1, name])


def save_roster_csv(path: str, rows: List[RosterRow]):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f)
        w.writerow(['course', 'slot', 'student'])
        for name, slot, students in rows:
            for student in students:
                w.writerow([name, slot + 1, student])


def save_schedule_csv(path: str, rows: List[ScheduleRow]):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f)
        w.writerow(['student', 'position', 'slot'])
        for name, slots in rows:
            for i, slot in enumerate(slots, start=1):
                w.writerow([name, i, slot + 1])
