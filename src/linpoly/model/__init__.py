"""
The MODEL layer contains the numeric functions and their text rendering.
It has NO knowledge of the console: values arrive through a reader callback.
"""
