"""Core modules for todo-tree."""
