"""
Core Utilities - Ambient Helpers

Environment lookup and logging setup shared by every layer.
"""
