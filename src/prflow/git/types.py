"""Request and plan types for git workflows."""

from dataclasses import dataclass

from prflow.gateway.process.types import Command


@dataclass(frozen=True)
class MergeRemoteRequest:
    """Merge a pull request that lives on a named remote.

    Attributes:
        username: Remote name that holds the pull request refs (e.g. "upstream")
        target_branch: Branch on that remote to merge into
        pr_number: Pull request number
        message: Merge commit message
    """

    username: str
    target_branch: str
    pr_number: int
    message: str


@dataclass(frozen=True)
class SyncBranchRequest:
    """Bring a branch from one remote up to date and push it to another.

    Attributes:
        username: Remote to take the branch from
        branch: Branch name, identical locally and on both remotes
        remote: Remote to push the updated branch to
    """

    username: str
    branch: str
    remote: str


@dataclass(frozen=True)
class CommandPlan:
    """Main and recovery command lists for one workflow run."""

    commands: tuple[Command, ...]
    recovery: tuple[Command, ...]
