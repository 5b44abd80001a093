"""
xAPI logstore plugin: converts platform event verbs into xAPI verb descriptors.
"""

__version__ = "1.0.0"
