"""
Shared fixtures for matching tests.
"""

import os
import sys
from pathlib import Path

# Keep test runs from writing log files
os.environ.setdefault("LOG_TO_FILE", "false")

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from matching.models import Contact, Deal, TeamMember, Transaction


@pytest.fixture
def team_members():
    return [
        TeamMember(id="tm-1", name="Jane Doe", title="Senior Associate", email="jane@bridge.example"),
        TeamMember(id="tm-2", name="John Michael Smith", title="Managing Director", email="jsmith@bridge.example"),
        TeamMember(id="tm-3", name="John Anderson", title="Leasing Agent", email="janderson@bridge.example"),
        TeamMember(id="tm-4", name="Maria de la Cruz", title="Broker", email="maria@bridge.example"),
    ]


@pytest.fixture
def transactions():
    return [
        Transaction(id="tx-1", agent_name="Jane Doe, John Smith", property_address="12 Park Ave"),
        Transaction(id="tx-2", agent_name="Zzyx Qqrv", property_address="400 Broadway"),
        Transaction(id="tx-3", agent_name="John", property_address="88 Wall St"),
    ]


@pytest.fixture
def contacts():
    return [
        Contact(id="c-1", full_name="Jane Parker", company="Parker Realty", contact_type="investor"),
    ]


@pytest.fixture
def deals():
    return [
        Deal(id="d-1", property_address="12 Park Ave", borough="Manhattan"),
    ]
