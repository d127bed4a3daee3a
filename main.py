#!/usr/bin/env python3
"""
Main entry point for dccli
"""

from dccli.main import cli

if __name__ == "__main__":
    cli()
