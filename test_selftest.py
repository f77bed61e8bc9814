import run_gui
from checkerboard.selftest import CHECKS, SelfTestResult, run_self_tests, summary


def test_all_builtin_checks_pass():
    results = run_self_tests()
    assert len(results) == len(CHECKS)
    failed = [r.name for r in results if not r.passed]
    assert failed == []


def test_summary_counts():
    results = [SelfTestResult("a", True), SelfTestResult("b", False), SelfTestResult("c", True)]
    assert summary(results) == (2, 3)
    assert summary([]) == (0, 0)


def test_raising_check_is_reported_as_failure(monkeypatch):
    def explode():
        raise KeyError("missing")

    monkeypatch.setattr("checkerboard.selftest.CHECKS", [("explodes", explode), ("fine", lambda: True)])
    results = run_self_tests()
    assert results == [SelfTestResult("explodes", False), SelfTestResult("fine", True)]


def test_command_line_self_test(capsys):
    assert run_gui.run_self_test() == 0
    out = capsys.readouterr().out
    assert f"Tests: {len(CHECKS)}/{len(CHECKS)} passed." in out
