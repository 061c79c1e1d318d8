#!/usr/bin/env python3
"""
Allows the package to be run as a script.
Example: python -m cpuinfo_parser summary /proc/cpuinfo
"""
from .cli import main

if __name__ == "__main__":
    main()
