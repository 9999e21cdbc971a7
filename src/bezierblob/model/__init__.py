"""
The MODEL layer contains pure data structures and the animation rules.
It has NO knowledge of the GUI (Qt).
It deals with Geometry, Pairing, Oscillation and the interactive Session.
"""
