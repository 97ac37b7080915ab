"""
Utilities shared by the mcpspec engine.
"""
