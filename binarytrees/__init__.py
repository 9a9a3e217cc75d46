"""Binary trees, binary search trees, AVL trees and max heaps on linked nodes."""

__version__ = "0.1.0"