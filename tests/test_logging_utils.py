import logging

import numpy as np

from sacredgrid.logging_utils import _safe_repr, apply_debug_logging, debug_log_call
from sacredgrid.types import Point


def test_debug_log_call_logs_entry_and_exit(caplog):
    logger = logging.getLogger("sacredgrid.tests.debug")

    @debug_log_call(logger)
    def add(a, b=0):
        return a + b

    with caplog.at_level(logging.DEBUG, logger="sacredgrid.tests.debug"):
        assert add(1, b=2) == 3
    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Entering") and "add" in message for message in messages)
    assert any("-> 3" in message for message in messages)


def test_debug_log_call_is_silent_above_debug(caplog):
    logger = logging.getLogger("sacredgrid.tests.quiet")
    wrapped = debug_log_call(logger)(lambda: 1)
    with caplog.at_level(logging.INFO, logger="sacredgrid.tests.quiet"):
        assert wrapped() == 1
    assert caplog.records == []


def test_wrapping_is_idempotent():
    logger = logging.getLogger("sacredgrid.tests.idem")

    def f():
        return None

    once = debug_log_call(logger)(f)
    assert debug_log_call(logger)(once) is once


def test_generators_are_not_consumed(caplog):
    logger = logging.getLogger("sacredgrid.tests.gen")

    @debug_log_call(logger)
    def count():
        yield from range(3)

    with caplog.at_level(logging.DEBUG, logger="sacredgrid.tests.gen"):
        assert list(count()) == [0, 1, 2]
    assert any("<generator" in record.getMessage() for record in caplog.records)


def test_safe_repr_summaries():
    assert _safe_repr(list(range(10))).endswith("... (10 items)]")
    assert "shape=(100,)" in _safe_repr(np.arange(100.0))
    assert _safe_repr(Point(1.0, 2.5)) == "Point(x=1, y=2.5)"


def test_apply_debug_logging_skips_private_names():
    def public():
        return 1

    def _private():
        return 2

    namespace = {"__name__": __name__, "public": public, "_private": _private}
    public.__module__ = __name__
    _private.__module__ = __name__
    apply_debug_logging(namespace)
    assert getattr(namespace["public"], "_debug_logging_wrapped", False)
    assert namespace["_private"] is _private
