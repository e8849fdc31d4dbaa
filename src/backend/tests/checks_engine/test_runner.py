from common.checks_engine.models import CheckStatus
from common.checks_engine.runner import ChecksRunner


def test_runner_evaluates_every_country_when_unrestricted(make_check, make_data):
    runner = ChecksRunner([make_check()])
    report = runner.run([make_data("AIA"), make_data("DOM")])
    assert [r.status for r in report.results] == [CheckStatus.FLAGGED, CheckStatus.FLAGGED]
    assert report.totals == {CheckStatus.FLAGGED: 2}


def test_runner_skips_countries_outside_whitelist(make_check, make_data):
    runner = ChecksRunner([make_check({"countries.whitelist": ["AIA", "DOM"]})])
    report = runner.run([make_data("AIA"), make_data("IRN")])
    by_country = {r.country_code: r for r in report.results}
    assert by_country["AIA"].status == CheckStatus.FLAGGED
    assert by_country["IRN"].status == CheckStatus.SKIPPED
    assert by_country["IRN"].flagged_items == []
    assert "IRN" in by_country["IRN"].summary


def test_runner_skips_blacklisted_countries(make_check, make_data):
    runner = ChecksRunner([make_check({"countries.blacklist": ["AIA", "DOM"]})])
    report = runner.run([make_data("AIA"), make_data("DOM"), make_data("IRN")])
    assert report.totals == {CheckStatus.SKIPPED: 2, CheckStatus.FLAGGED: 1}
    assert report.for_country("IRN")[0].status == CheckStatus.FLAGGED


def test_runner_skips_disabled_checks(make_check, make_data):
    runner = ChecksRunner([make_check({"enabled": False})])
    report = runner.run([make_data("AIA")])
    assert report.results[0].status == CheckStatus.SKIPPED
    assert "disabled" in report.results[0].summary.lower()


def test_runner_filters_by_check_name(make_check, make_data):
    runner = ChecksRunner([make_check()])
    report = runner.run([make_data("AIA")], check_names={"SomethingElse"})
    assert report.results == []
    assert report.totals == {}


def test_runner_passes_when_no_items(make_check, make_data):
    runner = ChecksRunner([make_check()])
    report = runner.run([make_data("AIA", items=[])])
    assert report.results[0].status == CheckStatus.PASS


def test_runner_logs_skips(make_check, make_data, caplog):
    runner = ChecksRunner([make_check({"countries.whitelist": ["AIA"]})])
    with caplog.at_level("DEBUG", logger="common.checks_engine.runner"):
        runner.run([make_data("DOM")])
    assert any("Skipping AlwaysFlagCheck for DOM" in rec.getMessage() for rec in caplog.records)
