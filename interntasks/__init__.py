"""Small utilities: text-file modes, run-length encoding, expression evaluation and a snake game."""

__version__ = "0.1.0"
__all__ = ["textfile", "rle", "expression", "snake"]