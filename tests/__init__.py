"""
Test suite for the task sheet extractor.

Run all tests: pytest
Run unit tests only: pytest tests/unit/
Run specific file: pytest tests/unit/test_task_sheet_cargo.py -v
"""
