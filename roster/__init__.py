"""Academic roster: students, teachers, subjects and their reports."""

__version__ = "0.1.0"
