"""
The MODEL layer contains pure data structures and the cell triangulation.
It has NO knowledge of file parsing or of the renderer.
"""
