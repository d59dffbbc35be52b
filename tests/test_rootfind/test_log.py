import logging

from thds.rootfind import find_project_root, log
from thds.rootfind.log.kw_formatter import MAX_MODULE_NAME_LEN


def test_compressed_module_name():
    mname = log.ThdsCompactFormatter.format_module_name(
        "very_very_very_long_module_name_that_is_extremely_long"
    )
    assert mname == "very_very_very_lon...t_is_extremely_long"
    assert len(mname) == MAX_MODULE_NAME_LEN()


def test_short_module_name_is_padded():
    mname = log.ThdsCompactFormatter.format_module_name("short")
    assert mname == "short" + " " * (MAX_MODULE_NAME_LEN() - len("short"))


def test_format_without_keyword_context():
    msg = log.ThdsCompactFormatter().format(
        logging.LogRecord("thds.rootfind", logging.INFO, "pathname", 1, "nothing to add", (), None)
    )
    assert msg.endswith(" () nothing to add")
    assert "info" in msg


def test_keyword_context_is_rendered(caplog):
    logger = log.getLogger("test_log")
    with log.logger_context(marker="Cargo.lock"), caplog.at_level(logging.INFO, logger="test_log"):
        logger.info("found it", root="/tmp/proj")
    formatted = log.ThdsCompactFormatter().format(caplog.records[0])
    assert formatted.endswith("(marker=Cargo.lock,root=/tmp/proj) found it")


def test_search_logs_each_directory_at_debug(make_tree, caplog):
    root = make_tree("proj/Cargo.lock", "proj/sub/")
    with caplog.at_level(logging.DEBUG, logger="thds.rootfind.project_root"):
        find_project_root("Cargo.lock", start=root / "proj" / "sub")
    checked = [r.kw_context["directory"] for r in caplog.records if "directory" in r.kw_context]
    assert checked == [root / "proj" / "sub", root / "proj"]
    assert caplog.records[-1].kw_context["root"] == root / "proj"
    assert all(r.kw_context["marker"] == "Cargo.lock" for r in caplog.records)


def test_console_config_leaves_existing_handlers_alone():
    handlers = list(logging.getLogger().handlers)
    assert handlers
    assert not log.configure_console_logging()
    assert logging.getLogger().handlers == handlers
