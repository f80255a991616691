import io

import pytest

from keybst import BSTree, Keyed, OrderViolationError
from keybst import log


@pytest.fixture
def logfile(monkeypatch):
    f = io.StringIO()
    monkeypatch.setattr(log, 'logger',
                        log.Logger(loglevel=log.LOG_DEBUG3, logfile=f,
                                   colors='never'))
    return f


class Item(Keyed):
    def __init__(self, ident):
        self.ident = ident

    def key(self):
        return self.ident


def test_default_level_is_silent(monkeypatch):
    f = io.StringIO()
    monkeypatch.setattr(log, 'logger', log.Logger(logfile=f, colors='never'))
    log.debug3("hidden")
    log.debug2("hidden")
    log.warn("shown")
    assert f.getvalue() == "warning: shown\n"


def test_tree_operations_are_traced(logfile):
    bst = BSTree()
    bst.insert(2)
    bst.insert(2)
    bst.insert(3)
    bst.delete(2)
    out = logfile.getvalue()
    assert "bstree: inserted key 2\n" in out
    assert "bstree: replaced value for key 2\n" in out
    assert "bstree: deleted key 2, successor 3 moved up\n" in out


def test_failed_check_is_traced(logfile):
    bst = BSTree()
    bst.insert(Item(5))
    bst.insert(Item(3))
    bst.find(3).data.ident = 7
    with pytest.raises(OrderViolationError):
        bst.check()
    assert logfile.getvalue().endswith("bstree: order check failed at key 7\n")


def test_level_filtering(monkeypatch):
    f = io.StringIO()
    monkeypatch.setattr(log, 'logger',
                        log.Logger(loglevel=log.LOG_DEBUG2, logfile=f,
                                   colors='never'))
    log.debug3("hidden")
    log.debug2("shown")
    log.error("bad")
    assert f.getvalue() == "shown\nerror: bad\n"


def test_colors_always(monkeypatch):
    f = io.StringIO()
    monkeypatch.setattr(log, 'logger', log.Logger(logfile=f, colors='always'))
    log.error("boom")
    log.warn("careful")
    assert f.getvalue() == (log.Colors.ERROR + "error: boom" +
                            log.Colors.RESET + "\n" +
                            log.Colors.WARN + "warning: careful" +
                            log.Colors.RESET + "\n")


def test_auto_colors_off_for_non_tty():
    logger = log.Logger(logfile=io.StringIO(), colors='auto')
    assert isinstance(logger.colors, log.NoColors)
    assert not isinstance(logger.colors, log.Colors)


def test_invalid_color_preference():
    with pytest.raises(ValueError):
        log.Logger(logfile=io.StringIO(), colors='sometimes')
