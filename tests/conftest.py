"""
Pytest configuration and shared fixtures for all modport tests.

Recognizers, emitters and drivers are stateless, so the expensive pieces
(the Lark specifier parser behind the recognizer) are shared across tests.
"""

import sys
import pytest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from modport.backends.typescript import TypeScriptEmitter
from modport.compiler.driver import RecoveryMode, TranspileDriver
from modport.frontend.recognizer import ImportRecognizer


# =============================================================================
# Session-scoped fixtures (shared across all tests)
# =============================================================================

@pytest.fixture(scope="session")
def recognizer():
    """Stateless recognizer shared across ALL tests."""
    return ImportRecognizer()


@pytest.fixture(scope="session")
def driver():
    """Driver that aborts at the first unrecognized position."""
    return TranspileDriver()


@pytest.fixture(scope="session")
def passthrough_driver():
    """Driver that keeps unrecognized text as UnknownExpression nodes."""
    return TranspileDriver(recovery=RecoveryMode.PASSTHROUGH)


# =============================================================================
# Function-scoped fixtures (default - one per test)
# =============================================================================

@pytest.fixture
def emitter():
    return TypeScriptEmitter()


@pytest.fixture
def terminating_emitter():
    """Emitter that writes `;` after every import declaration."""
    return TypeScriptEmitter(terminate_statements=True)


# =============================================================================
# Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test organization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
