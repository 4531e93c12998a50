"""Linear structures: linked list, stack, FIFO queue."""

from dsa_lite.linear.linked_list import LinkedList, LinkedListNode
from dsa_lite.linear.queue import Queue
from dsa_lite.linear.stack import Stack

__all__ = [
    "LinkedList",
    "LinkedListNode",
    "Queue",
    "Stack",
]
