"""Allow ``python -m exprcalc``."""

from exprcalc.cli import main

main()
