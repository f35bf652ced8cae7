"""
The MODEL layer contains pure value types.
It has NO knowledge of any renderer or scene graph.
It deals with points, screen coordinates and result records.
"""
