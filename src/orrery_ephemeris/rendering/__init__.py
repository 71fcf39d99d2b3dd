"""Plot rendering (matplotlib)."""
