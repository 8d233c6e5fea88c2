"""Run the talentrank CLI from a checkout: `python startcli.py match ...`.

Arguments are handed to `talentrank.cli.main` unchanged, so the
commands and flags are the same as for the installed `talentrank`
script.
"""
from __future__ import annotations

import sys

from talentrank.cli import main


if __name__ == "__main__":
    main(sys.argv[1:])
