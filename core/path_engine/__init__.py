"""
Path Engine Package
"""
from .credits_graph import CreditsGraph
from .connection_path import Connection, ConnectionPath
from .path_search import find_shortest_path, CancellationToken, SearchCancelled
from .orchestrator import PathOrchestrator

__all__ = [
    'CreditsGraph',
    'Connection',
    'ConnectionPath',
    'find_shortest_path',
    'CancellationToken',
    'SearchCancelled',
    'PathOrchestrator'
]
