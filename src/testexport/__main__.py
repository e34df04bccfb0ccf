"""Allow running testexport as a module: python -m testexport."""

from testexport.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
