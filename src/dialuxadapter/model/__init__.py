"""
The MODEL layer contains pure data structures and geometry.
It deals with Points, Panels, Openings, Furnishings and their I/O.
"""
