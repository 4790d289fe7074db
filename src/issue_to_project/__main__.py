"""Module entrypoint for ``python -m issue_to_project``."""

from issue_to_project.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
