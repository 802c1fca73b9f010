"""Core business logic layer.

Modules:
- prompts: turning plan steps and uploaded documents into completion prompts
- tasks_codec: storing an ordered list of steps in a single text column
"""
__all__ = ["prompts", "tasks_codec"]
