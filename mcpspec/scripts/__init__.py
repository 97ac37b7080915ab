"""
Command line entry points for mcpspec.
"""
