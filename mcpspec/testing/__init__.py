"""
Test execution and scheduling engine.
"""
