"""API module for linkgate commands.

Command functions return a StageResult so the CLI can announce, report progress,
and print structured output the same way for every command.
"""

__all__ = []
