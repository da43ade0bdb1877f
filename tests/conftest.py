"""
Shared fixtures for masterstat tests
"""

import pytest

from masterstat.testing import MasterScenario, MockMasterServer


@pytest.fixture
def master_factory():
    """Start mock masters on demand and stop them after the test"""
    servers = []

    def start(addresses=None, name="test", **options):
        scenario = MasterScenario(name, addresses)
        if "header" in options:
            scenario.set_header(options["header"])
        if "trailing" in options:
            scenario.set_trailing(options["trailing"])
        if "delay" in options:
            scenario.set_delay(options["delay"])
        if options.get("silent"):
            scenario.set_silent()

        server = MockMasterServer(scenario)
        server.start()
        servers.append(server)
        return server

    yield start

    for server in servers:
        server.stop()
