import argparse
import logging
import os
import sys

from examslots.config import COURSES_PER_STUDENT, DEFAULT_ALGO, LOG_LEVEL, LOG_LEVELS, configure_logging
from examslots.errors import MalformedInputError
from examslots.graph_build import build_conflict_graph
from examslots.io_utils import (
    read_enrollment_records, load_toronto_stu, load_enrollments_csv,
    save_slots_csv, save_roster_csv, save_schedule_csv
)
from examslots.scheduling.assign_timeslots import ALGORITHMS, assign_slots
from examslots.scheduling.evaluation import summary
from examslots.scheduling.reporting import render_report, slot_view, roster_view, schedule_view

logger = logging.getLogger(__name__)


def load_records(args):
    if args.stu:
        return load_toronto_stu(args.stu)
    if args.enrollments:
        return load_enrollments_csv(args.enrollments)
    if args.input in (None, '-'):
        return read_enrollment_records(sys.stdin, args.courses_per_student)
    return read_enrollment_records(args.input, args.courses_per_student)


def main(argv=None):
    p = argparse.ArgumentParser(description="ExamSlots – conflict-free exam slots by graph colouring")
    # Input modes
    src = p.add_mutually_exclusive_group()
    src.add_argument('input', nargs='?', default=None,
                     help='Enrollment file: a student line followed by its course lines (default: stdin)')
    src.add_argument('--stu', type=str, help='Toronto .stu file (one line of courses per student)')
    src.add_argument('--enrollments', type=str, help='CSV with student_id,course_id columns')
    p.add_argument('--courses-per-student', type=int, default=COURSES_PER_STUDENT)

    # Algo
    p.add_argument('--algo', type=str, default=DEFAULT_ALGO, choices=sorted(ALGORITHMS))

    # Output
    p.add_argument('--summary', action='store_true', help='Print graph and colouring statistics')
    p.add_argument('--out-dir', type=str, default=None, help='Also write slots.csv, roster.csv, schedule.csv here')
    p.add_argument('--log-level', type=str.upper, default=LOG_LEVEL, choices=LOG_LEVELS)
    args = p.parse_args(argv)

    configure_logging(args.log_level)

    try:
        records = load_records(args)
    except MalformedInputError as e:
        raise SystemExit(f"Malformed input: {e}")
    except ValueError as e:
        raise SystemExit(f"Invalid arguments: {e}")
    if not records:
        raise SystemExit("No enrollment records found")

    G = build_conflict_graph(records)
    counter = assign_slots(G, algo=args.algo)

    print(render_report(G, counter))
    if args.summary:
        print()
        print(summary(G, counter))

    if args.out_dir:
        os.makedirs(args.out_dir, exist_ok=True)
        save_slots_csv(os.path.join(args.out_dir, 'slots.csv'), slot_view(G, counter))
        save_roster_csv(os.path.join(args.out_dir, 'roster.csv'), roster_view(G))
        save_schedule_csv(os.path.join(args.out_dir, 'schedule.csv'), schedule_view(G))
        logger.info("wrote CSV reports to %s", args.out_dir)


if __name__ == '__main__':
    main()
