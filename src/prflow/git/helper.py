"""Git queries and multi-step workflows built on a ProcessRunner.

Queries are single commands whose output is read directly. Workflows read the
repository state once, build a CommandPlan and hand both lists to
ProcessRunner.run_sequence(), which stops at the first failure and runs the
recovery list.
"""

import logging
import re

from prflow.gateway.process.abc import ProcessRunner
from prflow.gateway.process.types import CommandFailed, SequenceResult
from prflow.git.plans import (
    build_add_remote_command,
    build_merge_remote_plan,
    build_sync_branch_plan,
    pr_branch_name,
    tmp_branch_name,
)
from prflow.git.types import CommandPlan, MergeRemoteRequest, SyncBranchRequest
from prflow.subprocess_utils import format_command

logger = logging.getLogger(__name__)

CURRENT_BRANCH_COMMAND = ("git", "rev-parse", "--abbrev-ref", "HEAD")
STATUS_COMMAND = ("git", "status", "--porcelain", "--untracked-files=no")
LAST_TAG_COMMAND = ("git", "describe", "--tags", "--abbrev=0")

_PR_NUMBER_PATTERN = re.compile(r"Merge pull request #(\d+)")


def parse_pr_number(merge_subject: str) -> int | None:
    """Extract the PR number from a GitHub merge commit subject."""
    match = _PR_NUMBER_PATTERN.search(merge_subject)
    if match is None:
        return None
    return int(match.group(1))


class GitHelper:
    """Git operations for one working tree.

    The runner is injected; every command runs in the runner's working
    directory. Callers must not run two workflows against the same working
    tree at once.
    """

    def __init__(self, runner: ProcessRunner) -> None:
        self._runner = runner

    # ============================================================================
    # Query Operations
    # ============================================================================

    def get_current_branch(self) -> str | None:
        """Get the checked-out branch, or None on failure or detached HEAD."""
        branch = self._runner.run(CURRENT_BRANCH_COMMAND)
        if not branch or branch == "HEAD":
            return None
        return branch

    def working_directory_is_clean(self) -> bool:
        """True if tracked files have no uncommitted changes.

        Untracked files are ignored. A failed status counts as not clean.
        """
        return self._runner.run(STATUS_COMMAND) == ""

    def local_branch_exists(self, branch: str) -> bool:
        """True if `git rev-parse --verify` resolves branch to a commit."""
        return bool(self._runner.run(("git", "rev-parse", "--verify", branch)))

    def remote_exists(self, remote: str) -> bool:
        return bool(self._runner.run(("git", "remote", "show", remote)))

    def ensure_remote_configuration(self, remote: str, remote_url: str) -> bool:
        """Add the remote if it is not configured yet.

        Returns:
            True if a remote was added, False if it already existed or the
            add failed
        """
        if self.remote_exists(remote):
            return False
        return self.add_remote(remote, remote_url)

    def add_remote(self, remote: str, remote_url: str) -> bool:
        """Run `git remote add` without checking whether the remote exists.

        Returns:
            True if the remote was added
        """
        logger.debug("Adding remote %s -> %s", remote, remote_url)
        # Goes through run_sequence so dry-run mode never mutates the config
        result = self._runner.run_sequence([build_add_remote_command(remote, remote_url)], [])
        return result.success

    def get_last_tag(self) -> str | None:
        return self._runner.run(LAST_TAG_COMMAND) or None

    def get_pr_for_sha(self, sha: str, branch: str) -> str | None:
        """Find the merge commit that brought sha into branch.

        Lists merges on the ancestry path from sha to branch (newest first) and
        takes the oldest, which is the first merge reached from sha.

        Returns:
            The merge commit as "<abbrev-sha> <subject>", or None if no merge
            commit is found
        """
        output = self._runner.run(
            ("git", "log", "--merges", "--ancestry-path", "--oneline", f"{sha}..{branch}")
        )
        if not output:
            return None
        return output.splitlines()[-1]

    def get_pr_number_for_sha(self, sha: str, branch: str) -> int | None:
        merge_commit = self.get_pr_for_sha(sha, branch)
        if merge_commit is None:
            return None
        return parse_pr_number(merge_commit)

    def show_changelog(self, reference: str | None = None) -> str | None:
        """Subjects of merge commits, newest first.

        Args:
            reference: Revision or range to log (e.g. "v1.2.0..HEAD"). All merges
                reachable from HEAD when None.
        """
        cmd = ["git", "log", "--merges", "--format=%s"]
        if reference is not None:
            cmd.append(reference)
        return self._runner.run(cmd) or None

    # ============================================================================
    # Workflows
    # ============================================================================

    def plan_merge_remote_pull_request(self, request: MergeRemoteRequest) -> CommandPlan | None:
        """Read repository state and build the merge plan.

        Returns None when the current branch cannot be determined, since the
        workflow would have nowhere to return to.
        """
        previous_branch = self.get_current_branch()
        if previous_branch is None:
            return None
        return build_merge_remote_plan(
            request,
            previous_branch=previous_branch,
            working_directory_clean=self.working_directory_is_clean(),
        )

    def merge_remote_pull_request(self, request: MergeRemoteRequest) -> SequenceResult:
        """Rebase a remote pull request onto its target and merge it with --no-ff."""
        plan = self.plan_merge_remote_pull_request(request)
        if plan is None:
            return _detached_head_result()

        leftover = self.find_leftover_merge_branch(request)
        if leftover is not None:
            return _leftover_branch_result(leftover)

        logger.debug(
            "Merging PR #%d from %s into %s",
            request.pr_number,
            request.username,
            request.target_branch,
        )
        return self._run_plan(plan)

    def find_leftover_merge_branch(self, request: MergeRemoteRequest) -> str | None:
        """Return pr_<n> or tmp_<target> if it already exists locally.

        The merge creates both branches and its recovery force-deletes them, so
        it only runs when neither exists yet.
        """
        for branch in (
            pr_branch_name(request.pr_number),
            tmp_branch_name(request.target_branch),
        ):
            if self.local_branch_exists(branch):
                return branch
        return None

    def plan_sync_branch(self, request: SyncBranchRequest) -> CommandPlan | None:
        previous_branch = self.get_current_branch()
        if previous_branch is None:
            return None
        return build_sync_branch_plan(
            request,
            previous_branch=previous_branch,
            working_directory_clean=self.working_directory_is_clean(),
            local_branch_exists=self.local_branch_exists(request.branch),
        )

    def sync_branch(self, request: SyncBranchRequest) -> SequenceResult:
        """Update a branch from one remote and push it to another."""
        plan = self.plan_sync_branch(request)
        if plan is None:
            return _detached_head_result()

        logger.debug(
            "Syncing %s from %s to %s", request.branch, request.username, request.remote
        )
        return self._run_plan(plan)

    def _run_plan(self, plan: CommandPlan) -> SequenceResult:
        for cmd in plan.commands:
            logger.debug("Planned: %s", format_command(cmd))
        return self._runner.run_sequence(plan.commands, plan.recovery)


def _detached_head_result() -> SequenceResult:
    return SequenceResult(
        failure=CommandFailed(
            command=CURRENT_BRANCH_COMMAND,
            message="Could not determine the current branch (detached HEAD?)",
        )
    )


def _leftover_branch_result(branch: str) -> SequenceResult:
    return SequenceResult(
        failure=CommandFailed(
            command=("git", "rev-parse", "--verify", branch),
            message=(
                f"Branch {branch} already exists, probably left over from an earlier run.\n"
                f"Delete it with `git branch -D {branch}` and try again."
            ),
        )
    )
