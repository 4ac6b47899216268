"""Command plans for the merge and sync workflows.

Plan builders are pure: they take the repository facts read before any
mutation (previous branch, cleanliness, branch existence) and return the
ordered command lists. Nothing here touches a process.

Local changes are set aside with `git add --update` and `git stash`, which
touch tracked files only. Untracked files stay in the working tree.
"""

from prflow.gateway.process.types import Command
from prflow.git.types import CommandPlan, MergeRemoteRequest, SyncBranchRequest

STAGE_TRACKED: Command = ("git", "add", "--update")
STASH: Command = ("git", "stash")
STASH_POP: Command = ("git", "stash", "pop")
REBASE_ABORT: Command = ("git", "rebase", "--abort")


def pr_branch_name(pr_number: int) -> str:
    return f"pr_{pr_number}"


def tmp_branch_name(target_branch: str) -> str:
    return f"tmp_{target_branch}"


def build_merge_remote_plan(
    request: MergeRemoteRequest,
    *,
    previous_branch: str,
    working_directory_clean: bool,
) -> CommandPlan:
    """Build the commands that merge a remote pull request.

    The PR head is fetched into pr_<n>, rebased onto tmp_<target> (a fresh copy
    of the remote target branch), merged with an explicit merge commit and
    pushed back to the target. Temporary branches are removed and the previous
    branch is checked out again.

    Callers must make sure neither temporary branch exists beforehand: recovery
    force-deletes both, since after a rejected push neither is merged anywhere.
    """
    remote = request.username
    target = request.target_branch
    pr_branch = pr_branch_name(request.pr_number)
    tmp_branch = tmp_branch_name(target)

    commands: list[Command] = [
        STAGE_TRACKED,
        STASH,
        (
            "git",
            "fetch",
            remote,
            f"pull/{request.pr_number}/head:{pr_branch}",
            f"+refs/heads/{target}:refs/remotes/{remote}/{target}",
        ),
        ("git", "checkout", "-b", tmp_branch, f"{remote}/{target}"),
        ("git", "checkout", pr_branch),
        ("git", "rebase", tmp_branch),
        ("git", "checkout", tmp_branch),
        ("git", "merge", pr_branch, "--no-ff", "-m", request.message.strip()),
        ("git", "push", remote, f"HEAD:{target}"),
        ("git", "branch", "-d", pr_branch),
        ("git", "checkout", previous_branch),
        ("git", "branch", "-d", tmp_branch),
    ]

    recovery: list[Command] = [
        REBASE_ABORT,
        ("git", "checkout", previous_branch),
        ("git", "branch", "-D", pr_branch),
        ("git", "branch", "-D", tmp_branch),
    ]

    # Only tracked changes are staged, so the stash holds something exactly
    # when the tree was dirty
    if not working_directory_clean:
        commands.append(STASH_POP)
        recovery.append(STASH_POP)

    return CommandPlan(commands=tuple(commands), recovery=tuple(recovery))


def build_sync_branch_plan(
    request: SyncBranchRequest,
    *,
    previous_branch: str,
    working_directory_clean: bool,
    local_branch_exists: bool,
) -> CommandPlan:
    """Build the commands that sync a branch from one remote to another.

    An existing local branch is rebased onto <username>/<branch>; otherwise it
    is created from a freshly fetched <username>/<branch>.
    """
    branch = request.branch
    source = f"{request.username}/{branch}"

    commands: list[Command] = [
        STAGE_TRACKED,
        STASH,
    ]
    recovery: list[Command] = []

    if local_branch_exists:
        commands.append(("git", "checkout", branch))
        commands.append(("git", "rebase", source))
        recovery.append(REBASE_ABORT)
    else:
        commands.append(("git", "fetch", request.username))
        commands.append(("git", "checkout", "-b", branch, source))

    commands.extend(
        [
            ("git", "push", request.remote, branch),
            ("git", "fetch", request.remote),
            ("git", "checkout", previous_branch),
        ]
    )
    recovery.append(("git", "checkout", previous_branch))

    if not working_directory_clean:
        commands.append(STASH_POP)
        recovery.append(STASH_POP)

    return CommandPlan(commands=tuple(commands), recovery=tuple(recovery))


def build_add_remote_command(remote: str, url: str) -> Command:
    return ("git", "remote", "add", remote, url)
