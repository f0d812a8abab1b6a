"""Classic data structures and graph algorithms: trees, heaps, queues, lists, hash tables and graphs."""

__version__ = "0.1.0"

__all__ = [
    "graph_algorithms",
    "fixed_array",
    "avl_tree",
    "binary_search_tree",
    "fenwick",
    "b_tree",
    "binomial_heap",
    "bloom_filter",
    "circular_linked_list",
    "circular_queue",
    "cuckoo_hash",
    "bounded_deque",
    "doubly_linked_list",
    "fibonacci_heap",
    "state_graph",
]