"""
desk-bridge

Callable operations a desktop host exposes to its UI: an outbound HTTP relay
and thin wrappers around the OS notification capability.
"""

__version__ = "0.1.0"
