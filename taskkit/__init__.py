"""Small console tasks: knapsack, train departures, range expansion and a terminal snake game."""

__version__ = "0.1.0"
__all__ = ["knapsack", "trains", "ranges", "snake_field", "snake_game"]