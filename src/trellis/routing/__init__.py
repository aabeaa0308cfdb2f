"""Routing: page filenames to a nested, normalized route tree.

Segments are tokenized, rendered into path patterns and merged into a
tree when a file and a like-named directory meet.
"""
