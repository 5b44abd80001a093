"""
Transformation of platform events into xAPI statement parts.
"""
