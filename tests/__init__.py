"""Test package for logconf.

Test Organisation
-----------------
- Unit tests (test_*.py): Test the level table, name canonicalization, both
  parsers, the configuration objects, and the JSON serializer.
- BDD tests (features/): Gherkin feature files with step definitions in
  steps/.
- Shared fixtures (conftest.py): sample configuration strings used across
  modules.
- Shared helpers (helpers.py): Rendering helpers such as
  `render_categories` for compact assertions.
- Snapshots (__snapshots__/): syrupy snapshots of serializer output.

Running Tests
-------------
Run all tests::

    pytest tests/

Run BDD tests only::

    pytest tests/steps/

Run a specific test file::

    pytest tests/test_basic_format.py
"""
