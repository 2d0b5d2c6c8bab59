"""Maze file loading."""

from .loader import MazeFormatError, parse_maze_text, read_maze_file

__all__ = ["MazeFormatError", "parse_maze_text", "read_maze_file"]
