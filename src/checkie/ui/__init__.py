"""PyQt6 front end: renders game snapshots and reports square clicks."""
