"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Typer runs in standalone mode: usage errors print their own message and exit 2,
    commands exit through ``sys.exit``; both surface here as SystemExit.
    """
    import typer

    from linkgate.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv:
        from linkgate.utils.get_package_version import get_package_version

        print(f"linkgate {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv, prog_name="linkgate")
    except SystemExit as e:
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
    return 0
