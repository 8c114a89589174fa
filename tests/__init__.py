"""Test suite for tempomap.

Test Structure:
- unit/mathematics/: gcd, Rational and Accumulator
- unit/units/: exact and approximate beat, time and tempo values
- unit/utils/: search, comparison, JSON and logging helpers
- unit/collections/: BeatOrderedList and Timetable integration
- unit/config/: pydantic models and the JSON/YAML loader
- conftest.py: Shared fixtures and test configuration
"""
