"""Tests for DryRunProcessRunner."""

from prflow.gateway.process.dry_run import DryRunProcessRunner
from prflow.gateway.process.fake import FakeProcessRunner


def test_dry_run_delegates_queries() -> None:
    inner = FakeProcessRunner(outputs={("git", "rev-parse", "--abbrev-ref", "HEAD"): "main"})
    runner = DryRunProcessRunner(inner)

    assert runner.run(("git", "rev-parse", "--abbrev-ref", "HEAD")) == "main"
    assert inner.executed_commands == [("git", "rev-parse", "--abbrev-ref", "HEAD")]


def test_dry_run_does_not_execute_sequences() -> None:
    inner = FakeProcessRunner(failures={("git", "push", "origin", "main"): "rejected"})
    runner = DryRunProcessRunner(inner)

    result = runner.run_sequence(
        [("git", "stash"), ("git", "push", "origin", "main")],
        [("git", "stash", "pop")],
    )

    assert result.success
    assert inner.executed_commands == []
    assert runner.planned_sequences == [
        (
            (("git", "stash"), ("git", "push", "origin", "main")),
            (("git", "stash", "pop"),),
        )
    ]


def test_dry_run_prints_planned_commands(capsys) -> None:
    runner = DryRunProcessRunner(FakeProcessRunner())

    runner.run_sequence([("git", "merge", "pr_1", "--no-ff", "-m", "Fix bug")], [])

    captured = capsys.readouterr()
    assert "[dry-run] git merge pr_1 --no-ff -m 'Fix bug'" in captured.err
