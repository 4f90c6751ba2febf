#!/usr/bin/env python3
"""RunCat Endless — jump the sprouts, or let the cat play itself.

    python pipeline.py play [--autoplay] [--seed N]
    python pipeline.py simulate [--sims N] [--workers N]
    python pipeline.py replay | report | best [--reset] | doctor
"""

from runcat.ui.cli.main import main

if __name__ == "__main__":
    main()
