"""Git workflows and queries.

Import from submodules:
- helper: GitHelper
- plans: build_merge_remote_plan, build_sync_branch_plan
- types: MergeRemoteRequest, SyncBranchRequest, CommandPlan
"""
