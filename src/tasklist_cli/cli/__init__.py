"""click front end for Task List CLI; the ``tasklist`` script runs ``main``."""

from .tasks import cli, main

__all__ = ["cli", "main"]
