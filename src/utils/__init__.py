"""
Utility modules for the D&R Protocol.

Cross-cutting concerns:
- Storage: File I/O helpers for report persistence
"""
