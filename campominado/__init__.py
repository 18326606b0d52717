"""Terminal minesweeper with difficulty levels, flood-fill reveals and a game log."""

__version__ = "1.0.0"
__all__ = ["board", "cli", "gamelog", "render"]