"""Classic data structures (AVL tree, doubly linked list, queues) and console programs built on them."""

__version__ = "0.1.0"

__all__ = [
    "avltree",
    "doubly_linked_list",
    "infix",
    "order_queue",
    "parentheses",
    "priority_queue",
    "quilt_orders",
    "restaurant",
    "restaurant_app",
]