"""
Flat-file Bank System

A single-user console bank: accounts held in memory, persisted to a JSON
snapshot on every change, with a plain-text transaction log.
"""

__version__ = "1.0.0"
