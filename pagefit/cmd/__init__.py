"""Command implementations for the pagefit CLI."""

from pagefit.cmd.batch import cmd_batch
from pagefit.cmd.measure import cmd_measure
from pagefit.cmd.render import cmd_render, cmd_templates

__all__ = [
    "cmd_batch",
    "cmd_measure",
    "cmd_render",
    "cmd_templates",
]
