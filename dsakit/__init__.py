"""Classic data structures and algorithms: bounded arrays and searches, sorting, a max-heap, graphs, stacks and queues."""

__version__ = "0.1.0"

__all__ = ["arrays", "sorting", "heap", "graph", "stack", "queues"]