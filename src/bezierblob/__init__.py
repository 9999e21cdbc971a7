"""
Interactive blob drawn with cubic Bezier curves.
"""
__version__ = "0.1.0"
