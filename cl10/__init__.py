"""
cl10 - Ten-slot clipboard history

A small per-user watcher that keeps the last few clipboard snippets in
memory and serves them to the cl10 command line over a local socket.
"""

__version__ = "0.1.0"
__author__ = "cl10 Contributors"
