"""
meetzone - propose a meeting time and see it in every participant's timezone.
"""

__version__ = "0.1.0"
