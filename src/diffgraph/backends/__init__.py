"""Backends for respondent graph output (DOT, matplotlib)."""

from .dot_generator import DotMode, generate_dot, save_dot_file
from .matplotlib_renderer import render_graph

__all__ = ["DotMode", "generate_dot", "save_dot_file", "render_graph"]
