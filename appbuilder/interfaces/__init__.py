"""Interface layer for appbuilder.

- cli: Typer command line (``appbuilder --type=<value>``)
"""

from appbuilder.interfaces.cli import app

__all__ = ["app"]
