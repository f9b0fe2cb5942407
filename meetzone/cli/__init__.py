"""
Command-line shell around the meetzone engine.
"""
