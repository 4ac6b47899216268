"""Process runner gateway.

This module provides the gateway through which every external command runs.

Import from submodules:
- abc: ProcessRunner
- real: RealProcessRunner
- fake: FakeProcessRunner
- dry_run: DryRunProcessRunner
- types: Command, CommandSucceeded, CommandFailed, SequenceResult
"""
