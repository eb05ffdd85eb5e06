"""
Test calculation history formatting
"""
import re

from history_manager import HistoryManager


def test_newest_first():
    history_mgr = HistoryManager()
    history_mgr.add_calculation("2 + 3", "5")
    history_mgr.add_calculation("5 * 2", "10")
    assert [h[0] for h in history_mgr.get_calculation_history()] == ["5 * 2", "2 + 3"]


def test_bounded_by_max_items():
    history_mgr = HistoryManager(max_items=3)
    for i in range(5):
        history_mgr.add_calculation(f"{i} + 1", str(i + 1))
    assert len(history_mgr) == 3
    assert [h[1] for h in history_mgr.get_calculation_history()] == ["5", "4", "3"]


def test_limit():
    history_mgr = HistoryManager()
    for i in range(10):
        history_mgr.add_calculation(f"{i} - 1", str(i - 1))
    assert len(history_mgr.get_calculation_history(limit=4)) == 4
    assert len(history_mgr.get_calculation_history(limit=None)) == 10


def test_formatting():
    history_mgr = HistoryManager()
    history_mgr.add_calculation("7 / 2", "3.5")
    formatted = history_mgr.format_calculation_history()
    assert len(formatted) == 1
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}: 7 / 2 = 3\.5", formatted[0])


def test_clear():
    history_mgr = HistoryManager()
    history_mgr.add_calculation("1 + 1", "2")
    history_mgr.clear_calculation_history()
    assert history_mgr.get_calculation_history() == []
    assert history_mgr.format_calculation_history() == []
