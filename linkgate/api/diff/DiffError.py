"""Error raised when the staged diff cannot be read."""


class DiffError(RuntimeError):
    """git could not be run or did not produce a diff."""
