"""
The MODEL layer contains pure data structures and the geometry kernel.
It has NO knowledge of the GUI (Qt) or the drawing backend (pyqtgraph).
It deals with angles, trigonometric geometry and animation state.
"""
