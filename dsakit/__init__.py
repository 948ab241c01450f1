"""Classic data structures and algorithms: graphs, search, sorting, hashing, stacks, queues, trees, backtracking and dynamic programming."""

__version__ = "0.1.0"