"""
The VIEW layer: Qt window and the pyqtgraph drawing surface.
It only reads Scene objects and queues commands.
"""
