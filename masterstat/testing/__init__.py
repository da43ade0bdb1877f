"""
Testing infrastructure for masterstat
"""

from .mock_server import MasterScenario, MockMasterServer, ServerState

__all__ = ['MockMasterServer', 'MasterScenario', 'ServerState']
