"""Core business logic — models, tier rules, checks, and the evaluator.

This module is framework-agnostic. It has no dependency on MCP, SQLAlchemy,
or any server framework; storage is supplied by the caller.
"""
