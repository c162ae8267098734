import pytest

from first_project.utilities.result import StepResult, WalkthroughReport


class TestWalkthroughReport:
    def test_empty_report_is_successful(self):
        report = WalkthroughReport()
        assert report.success
        assert report.summary() == "Walkthrough finished: 0 of 0 steps succeeded"

    def test_failures_are_collected_in_order(self):
        report = WalkthroughReport()
        report.add(StepResult("connect", True))
        report.add(StepResult("create database mydb", False, "duplicate database name"))
        report.add(StepResult("create collection firstCollection", False, "duplicate name"))

        assert not report.success
        assert [result.action for result in report.failed()] == ["create database mydb", "create collection firstCollection"]
        assert [result.action for result in report.succeeded()] == ["connect"]
        assert report.summary() == "Walkthrough finished: 1 of 3 steps succeeded"

    def test_get_returns_last_result_for_action(self):
        report = WalkthroughReport()
        report.add(StepResult("step", False, "first"))
        latest = report.add(StepResult("step", True, value=2))
        assert report.get("step") is latest
        with pytest.raises(KeyError):
            report.get("other")
