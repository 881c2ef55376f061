"""
The CONTROLLER layer turns input into state changes and state into frames.
It is pure Python: no Qt, no drawing backend.
"""
