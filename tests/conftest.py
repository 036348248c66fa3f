from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def demo_path() -> Path:
    return FIXTURES / "demo.gpx"


@pytest.fixture
def demo_text(demo_path) -> str:
    return demo_path.read_text(encoding="utf-8")


@pytest.fixture
def fresh_state():
    """Reset the global MCP session state around a test."""
    from gpx_parser.state import state, ExportParams
    state.document = None
    state.source = None
    state.export_params = ExportParams()
    yield state
    state.document = None
    state.source = None
    state.export_params = ExportParams()


@pytest.fixture
def anyio_backend():
    return "asyncio"
