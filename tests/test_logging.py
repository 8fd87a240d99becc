import logging

from src.utils.logging import StripAnsiFilter, attach_strip_ansi_to_file_handlers, configure_logging


def test_strip_ansi_filter_removes_color_codes():
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "\x1b[32mDone\x1b[0m", None, None)

    assert StripAnsiFilter().filter(record) is True
    assert record.msg == "Done"


def test_filter_is_attached_to_file_handlers_only(tmp_path):
    root = logging.getLogger()
    file_handler = logging.FileHandler(tmp_path / "app.log")
    stream_handler = logging.StreamHandler()
    root.addHandler(file_handler)
    root.addHandler(stream_handler)
    try:
        attach_strip_ansi_to_file_handlers()

        assert any(isinstance(f, StripAnsiFilter) for f in file_handler.filters)
        assert not any(isinstance(f, StripAnsiFilter) for f in stream_handler.filters)
    finally:
        root.removeHandler(file_handler)
        root.removeHandler(stream_handler)
        file_handler.close()


def test_configure_logging_falls_back_to_basic_config(tmp_path):
    root = logging.getLogger()
    previous_level = root.level
    try:
        configure_logging(config_path=tmp_path / "missing.ini", level="WARNING")

        assert not (tmp_path / "logs").exists()
    finally:
        root.setLevel(previous_level)


def test_configure_logging_applies_level_and_log_file(tmp_path):
    config = tmp_path / "logging.ini"
    config.write_text(
        "[loggers]\nkeys=root\n\n"
        "[handlers]\nkeys=file\n\n"
        "[formatters]\nkeys=default\n\n"
        "[logger_root]\nlevel=INFO\nhandlers=file\n\n"
        "[handler_file]\nclass=FileHandler\nlevel=INFO\nformatter=default\n"
        "args=('%(logdir)s/%(logfile)s', 'a', 'utf-8')\n\n"
        "[formatter_default]\nformat=%(message)s\n"
    )
    root = logging.getLogger()
    previous_handlers, previous_level = root.handlers[:], root.level
    try:
        configure_logging(config_path=config, level="ERROR", log_file="dictionary.log")

        assert root.level == logging.ERROR
        assert (tmp_path / "logs" / "dictionary.log").exists()
        assert all(
            any(isinstance(f, StripAnsiFilter) for f in handler.filters)
            for handler in root.handlers
            if isinstance(handler, logging.FileHandler)
        )
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in previous_handlers:
            root.addHandler(handler)
        root.setLevel(previous_level)
