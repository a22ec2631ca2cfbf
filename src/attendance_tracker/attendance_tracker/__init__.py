"""Attendance Tracker package.

Feature modules (ledger, blackouts, schedules, semester, ...) hold plain
domain models; ``eligibility`` and ``leave`` hold the date-aware arithmetic
built on them. Persistence and the Flask layer sit at the edges and are
injected through ``container.py``.
"""
