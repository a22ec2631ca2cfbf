"""Example: run the engine directly (no Flask, no database).

Builds one student in memory and asks whether a week of leave is safe.
"""

from datetime import date

from src.attendance_tracker.attendance_tracker.core.enums import Weekday
from src.attendance_tracker.attendance_tracker.leave.simulator import LeaveImpactSimulator
from src.attendance_tracker.attendance_tracker.ledger.seeding import initial_records
from src.attendance_tracker.attendance_tracker.semester.model import SemesterWindow
from src.attendance_tracker.attendance_tracker.students.model import StudentContext
from src.attendance_tracker.attendance_tracker.subjects.model import Subject


def main():
    today = date(2026, 10, 19)
    student = StudentContext(name="Demo")
    student.configure_semester(
        SemesterWindow(
            start=date(2026, 7, 20),
            last_teaching_day=date(2026, 11, 20),
            exam_start=date(2026, 9, 21),
            exam_end=date(2026, 9, 26),
        )
    )
    student.calendar.add_holiday(date(2026, 10, 2), "Gandhi Jayanti")

    dsa = student.add_subject(Subject(name="Data Structures", classes_per_week=3, subject_id=1))
    for day in (Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY):
        student.schedule.add_class(day, dsa)

    for r in initial_records(
        conducted=36,
        attended=29,
        subject=dsa,
        schedule=student.schedule,
        calendar=student.calendar,
        today=today,
        semester_start=student.semester.start,
    ):
        dsa.ledger.record_attendance(r.date, r.present)

    report = LeaveImpactSimulator().simulate(student, date(2026, 10, 26), date(2026, 10, 30), today=today)
    for impact in report.impacts:
        print(f"{impact.subject.name:<20}: {impact.current_percentage:.1f}% -> {impact.post_leave_percentage:.1f}%")
        if impact.projection:
            print(f"   {impact.projection.outcome.value}: attend {impact.projection.must_attend} "
                  f"of {impact.projection.remaining_classes} remaining")
    print(report.verdict.value)


if __name__ == "__main__":
    main()
