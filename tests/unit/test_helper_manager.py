"""
Unit tests for the shared helper handle and the one-shot shortcuts.

Covers:
- get_or_create returning a single shared helper
- get_default before and after initialization
- Module level functions operating on a handle
- add_to_log and array_to_log
"""
import re
import threading

import pytest

from loghelper.backends import FileBackend
from loghelper.config import LogHelperSettings
from loghelper.errors import BackendUnavailableError
from loghelper.formatting import RenderMode
from loghelper.helper import (
    add_to_log,
    array_to_log,
    get_default,
    get_or_create,
    log,
    reset_default,
    set_backend,
    set_render_mode,
    set_topic,
)

MARKER_RE = re.compile(r"^- - - - - \[.*\] - - - - -$")


def read_lines(path):
    with open(path, encoding="utf-8") as f:
        return f.read().splitlines()


def test_get_default_before_initialization():
    with pytest.raises(BackendUnavailableError):
        get_default()


def test_get_or_create_returns_same_helper(log_dir):
    first = get_or_create("orders", "OrderModule", str(log_dir))
    second = get_or_create("billing", "Other")
    assert first is second
    assert second.topic == "orders"
    assert get_default() is first


def test_get_or_create_is_thread_safe(log_dir):
    results = []

    def worker():
        results.append(get_or_create("orders", log_directory=str(log_dir)))

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len({id(h) for h in results}) == 1


def test_reset_default_forgets_helper(log_dir):
    first = get_or_create("orders", log_directory=str(log_dir))
    reset_default()
    assert get_or_create("billing", log_directory=str(log_dir)) is not first


def test_get_or_create_from_settings(log_dir):
    settings = LogHelperSettings(LOG_TOPIC="orders", LOG_DIRECTORY=str(log_dir))
    helper = get_or_create(settings=settings)
    assert isinstance(helper.backend, FileBackend)
    assert helper.target.path == str(log_dir / "log_orders.txt")


def test_module_functions_operate_on_handle(log_dir):
    helper = get_or_create("orders", "OrderModule", str(log_dir))
    with pytest.raises(BackendUnavailableError):
        log(helper, "too early")

    set_backend(helper, FileBackend.for_path(helper.target.path))
    set_render_mode(helper, "exported")
    assert helper.render_mode is RenderMode.EXPORTED
    assert log(helper, 42) is True
    assert read_lines(helper.target.path)[1:] == ["<OrderModule> 42"]

    set_topic(helper, "billing")
    assert helper.target.path.endswith("log_billing.txt")
    assert log(helper, "moved")
    assert read_lines(helper.target.path)[1:] == ["<OrderModule> 'moved'"]


def test_module_log_labels_its_caller(log_dir):
    helper = get_or_create("orders", log_directory=str(log_dir))
    set_backend(helper, FileBackend.for_path(helper.target.path))
    assert log(helper, "x")
    record = read_lines(helper.target.path)[1]
    assert re.match(r"^<.*test_helper_manager\.py:\d+> x$", record)


def test_add_to_log_writes_exported_value(log_dir):
    assert add_to_log({"id": 7}, "orders", log_directory=str(log_dir)) is True
    lines = read_lines(str(log_dir / "log_orders.txt"))
    assert MARKER_RE.match(lines[0])
    assert re.match(r"^<.*test_helper_manager\.py:\d+> array \($", lines[1])
    assert lines[2:] == ["  'id' => 7,", ")"]


def test_add_to_log_clear_before(log_dir):
    add_to_log("old", "orders", log_directory=str(log_dir))
    add_to_log("new", "orders", clear_before=True, log_directory=str(log_dir))
    records = [
        line
        for line in read_lines(str(log_dir / "log_orders.txt"))
        if not MARKER_RE.match(line)
    ]
    assert len(records) == 1
    assert records[0].endswith("> 'new'")


def test_array_to_log_writes_pretty_value(log_dir):
    assert array_to_log(["a"], "dump", log_directory=str(log_dir)) is True
    lines = read_lines(str(log_dir / "log_dump.txt"))
    assert lines[1].endswith("> [")
    assert lines[2:] == ["[", "    0 => 'a',", "]", "]"]


def test_shortcut_default_directory(tmp_path, monkeypatch):
    monkeypatch.setenv("DOCUMENT_ROOT", str(tmp_path))
    assert add_to_log("x")
    assert (tmp_path / "logs" / "log_.txt").exists()
