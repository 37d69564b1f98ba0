"""Classic algorithms on arrays, matrices, text, grids, graphs, binary trees and linked lists."""

__version__ = "0.1.0"