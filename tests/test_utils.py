import logging

from bson import ObjectId

from core.utils import describe_person, setup_logging, truncate_text


def test_truncate_text():
    assert truncate_text("") == ""
    assert truncate_text("short") == "short"
    assert truncate_text("x" * 50, max_length=10) == "xxxxxxx..."


def test_describe_person():
    object_id = ObjectId()
    line = describe_person({"_id": object_id, "name": "Bob", "age": 20, "favoriteFoods": ["tacos"]})
    assert line.startswith(f"Bob ({object_id})")
    assert "age=20" in line
    assert "foods=tacos" in line


def test_describe_missing_person():
    assert describe_person(None) == "<none>"


def test_setup_logging_writes_dated_file(tmp_path):
    root_logger = logging.getLogger()
    handlers_before = list(root_logger.handlers)
    level_before = root_logger.level
    try:
        setup_logging("DEBUG", log_dir=str(tmp_path), to_file=True)
        assert root_logger.level == logging.DEBUG
        assert logging.getLogger("pymongo").level == logging.WARNING
        assert list(tmp_path.glob("people_*.log"))
    finally:
        for handler in root_logger.handlers[:]:
            if handler not in handlers_before:
                root_logger.removeHandler(handler)
                handler.close()
        root_logger.setLevel(level_before)
