"""
InfluxDB transport Command Line Interface.

Provides:
- query: Run a query and print the raw response
- execute: Run a management statement
- write: Send line protocol from a file or stdin
- create-database: Create the v1 database named in the URL
"""

from .commands import cli, main

__all__ = ["cli", "main"]
