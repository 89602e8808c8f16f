#!/usr/bin/env python3
"""
tracelog demo

Thin wrapper around the packaged demo command; emits one colored line per
log level to stderr.

To run: python main.py --flags date,time,short_file
"""

from tracelog.cli import run

if __name__ == "__main__":
    raise SystemExit(run())
