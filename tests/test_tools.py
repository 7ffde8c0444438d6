"""
Tests for MCP tools.

Tests the MCP tool implementations for sessions, keyboard and graph.
"""

import json
from pathlib import Path

import pytest

from chuk_mcp_dissonance.session import SessionManager
from chuk_mcp_dissonance.tools import (
    register_graph_tools,
    register_keyboard_tools,
    register_session_tools,
)


# Mock MCP server for testing tools
class MockMCPServer:
    """Mock MCP server that just stores registered tools."""

    def __init__(self, name: str):
        self.name = name
        self.tools: dict = {}

    def tool(self, func):
        """Decorator to register a tool."""
        self.tools[func.__name__] = func
        return func


@pytest.fixture
def manager(temp_dir: Path) -> SessionManager:
    """Session manager writing into a temp dir."""
    return SessionManager(output_dir=temp_dir)


@pytest.fixture
def tools(manager: SessionManager) -> dict:
    """Every tool registered against one manager."""
    mcp = MockMCPServer("test")
    registered: dict = {}
    registered.update(register_session_tools(mcp, manager))
    registered.update(register_keyboard_tools(mcp, manager))
    registered.update(register_graph_tools(mcp, manager))
    return registered


class TestRegistration:
    """Tests for tool registration."""

    def test_all_tools_registered(self, manager: SessionManager) -> None:
        """Every tool lands on the server."""
        mcp = MockMCPServer("test")
        register_session_tools(mcp, manager)
        register_keyboard_tools(mcp, manager)
        register_graph_tools(mcp, manager)
        assert set(mcp.tools) == {
            "dissonance_create_session",
            "dissonance_list_sessions",
            "dissonance_delete_session",
            "dissonance_reset_session",
            "dissonance_export_midi",
            "dissonance_list_keys",
            "dissonance_select_key",
            "dissonance_deselect_key",
            "dissonance_toggle_key",
            "dissonance_get_graph",
            "dissonance_classify_interval",
            "dissonance_drag_start",
            "dissonance_drag_move",
            "dissonance_drag_end",
        }


class TestSessionTools:
    """Tests for session tools."""

    @pytest.mark.asyncio
    async def test_create_session(self, tools: dict) -> None:
        """Create session tool."""
        data = json.loads(await tools["dissonance_create_session"](name="test"))
        assert data["status"] == "success"
        assert data["session"]["name"] == "test"
        assert data["session"]["keys"] == 25

    @pytest.mark.asyncio
    async def test_create_duplicate(self, tools: dict) -> None:
        """Duplicate names are an error."""
        await tools["dissonance_create_session"](name="test")
        data = json.loads(await tools["dissonance_create_session"](name="test"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_list_sessions(self, tools: dict) -> None:
        """List sessions tool."""
        await tools["dissonance_create_session"](name="one")
        await tools["dissonance_create_session"](name="two")
        await tools["dissonance_toggle_key"](session="two", key="c3")

        data = json.loads(await tools["dissonance_list_sessions"]())
        assert data["status"] == "success"
        by_name = {s["name"]: s for s in data["sessions"]}
        assert set(by_name) == {"one", "two"}
        assert by_name["two"]["nodes"] == 1

    @pytest.mark.asyncio
    async def test_delete_session(self, tools: dict) -> None:
        """Delete session tool."""
        await tools["dissonance_create_session"](name="test")
        data = json.loads(await tools["dissonance_delete_session"](name="test"))
        assert data["status"] == "success"

        data = json.loads(await tools["dissonance_delete_session"](name="test"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_reset_session(self, tools: dict) -> None:
        """Reset clears the graph."""
        await tools["dissonance_create_session"](name="test")
        await tools["dissonance_toggle_key"](session="test", key="c3")
        await tools["dissonance_toggle_key"](session="test", key="e3")

        data = json.loads(await tools["dissonance_reset_session"](name="test"))
        assert data["status"] == "success"
        assert data["graph"]["nodes"] == []
        assert data["graph"]["edges"] == []

    @pytest.mark.asyncio
    async def test_export_midi(self, tools: dict) -> None:
        """Export writes a MIDI file of the tones played."""
        await tools["dissonance_create_session"](name="test")
        await tools["dissonance_toggle_key"](session="test", key="c3")
        await tools["dissonance_toggle_key"](session="test", key="g3")
        await tools["dissonance_toggle_key"](session="test", key="c3")

        data = json.loads(await tools["dissonance_export_midi"](name="test"))
        assert data["status"] == "success"
        assert data["messages"] == 3
        assert Path(data["path"]).exists()
        assert Path(data["path"]).name == "test.mid"

    @pytest.mark.asyncio
    async def test_export_missing_session(self, tools: dict) -> None:
        """Export of an unknown session is an error."""
        data = json.loads(await tools["dissonance_export_midi"](name="nope"))
        assert data["status"] == "error"


class TestKeyboardTools:
    """Tests for keyboard tools."""

    @pytest.mark.asyncio
    async def test_list_keys(self, tools: dict) -> None:
        """Keys are listed with selection state."""
        await tools["dissonance_create_session"](name="test")
        await tools["dissonance_select_key"](session="test", key="e3")

        data = json.loads(await tools["dissonance_list_keys"](session="test"))
        assert data["status"] == "success"
        assert len(data["keys"]) == 25
        e3 = next(k for k in data["keys"] if k["id"] == "e3")
        assert e3["selected"] is True
        assert e3["pitch_class"] == "E"

    @pytest.mark.asyncio
    async def test_select_and_deselect(self, tools: dict) -> None:
        """Select adds a node; deselect removes it."""
        await tools["dissonance_create_session"](name="test")

        data = json.loads(await tools["dissonance_select_key"](session="test", key="c3"))
        assert data["node_id"] == 1
        data = json.loads(await tools["dissonance_select_key"](session="test", key="f#3"))
        assert data["graph"]["edges"][0]["level"] == 6

        data = json.loads(await tools["dissonance_deselect_key"](session="test", key="f#3"))
        assert data["removed"] is True
        assert data["graph"]["edges"] == []

    @pytest.mark.asyncio
    async def test_octave_keys_share_node(self, tools: dict) -> None:
        """c3 and c4 share a node."""
        await tools["dissonance_create_session"](name="test")
        await tools["dissonance_select_key"](session="test", key="c3")
        data = json.loads(await tools["dissonance_select_key"](session="test", key="c4"))
        assert data["node_id"] is None
        assert data["graph"]["counts"] == {"C": 2}

        data = json.loads(await tools["dissonance_deselect_key"](session="test", key="c3"))
        assert data["removed"] is False
        assert len(data["graph"]["nodes"]) == 1

    @pytest.mark.asyncio
    async def test_select_twice_is_error(self, tools: dict) -> None:
        """Selecting a held key reports the contract violation."""
        await tools["dissonance_create_session"](name="test")
        await tools["dissonance_select_key"](session="test", key="c3")
        data = json.loads(await tools["dissonance_select_key"](session="test", key="c3"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_unknown_key(self, tools: dict) -> None:
        """Unknown keys are an error."""
        await tools["dissonance_create_session"](name="test")
        data = json.loads(await tools["dissonance_toggle_key"](session="test", key="x9"))
        assert data["status"] == "error"
        assert "x9" in data["message"]

    @pytest.mark.asyncio
    async def test_unknown_session(self, tools: dict) -> None:
        """Unknown sessions are an error."""
        data = json.loads(await tools["dissonance_toggle_key"](session="nope", key="c3"))
        assert data["status"] == "error"


class TestGraphTools:
    """Tests for graph and drag tools."""

    @pytest.mark.asyncio
    async def test_get_graph(self, tools: dict) -> None:
        """Graph has nodes and edges with paths."""
        await tools["dissonance_create_session"](name="test")
        for key in ("c3", "e3", "g3"):
            await tools["dissonance_toggle_key"](session="test", key=key)

        data = json.loads(await tools["dissonance_get_graph"](session="test"))
        graph = data["graph"]
        assert [n["pitch_class"] for n in graph["nodes"]] == ["C", "E", "G"]
        assert len(graph["edges"]) == 3
        assert all(e["path"].startswith("M ") for e in graph["edges"])

    @pytest.mark.asyncio
    async def test_classify_interval(self, tools: dict) -> None:
        """C to G is a consonant fifth."""
        data = json.loads(await tools["dissonance_classify_interval"](first="C", second="G"))
        assert data["interval"] == 7
        assert data["folded"] == 5
        assert data["level"] == 1
        assert data["name"] == "perfect"

    @pytest.mark.asyncio
    async def test_classify_bad_name(self, tools: dict) -> None:
        """Unknown pitch class names are an error."""
        data = json.loads(await tools["dissonance_classify_interval"](first="C", second="Q"))
        assert data["status"] == "error"

    @pytest.mark.asyncio
    async def test_drag_cycle(self, tools: dict) -> None:
        """Start, move and end a drag."""
        await tools["dissonance_create_session"](name="test")
        await tools["dissonance_toggle_key"](session="test", key="c3")
        await tools["dissonance_toggle_key"](session="test", key="g3")
        before = json.loads(await tools["dissonance_get_graph"](session="test"))["graph"]

        data = json.loads(await tools["dissonance_drag_start"](session="test", node_id=1, x=0, y=0))
        assert data["dragging"] == 1
        result = await tools["dissonance_drag_move"](session="test", node_id=1, x=10, y=20)
        data = json.loads(result)
        assert data["delta"] == {"x": 10, "y": 20}
        assert data["graph"]["dragging"] == 1
        data = json.loads(await tools["dissonance_drag_end"](session="test", node_id=1))
        assert data["dragging"] is None

        after = json.loads(await tools["dissonance_get_graph"](session="test"))["graph"]
        assert after["nodes"][0]["x"] == pytest.approx(before["nodes"][0]["x"] + 10)
        assert after["edges"][0]["y1"] == pytest.approx(before["edges"][0]["y1"] + 20)
        assert after["edges"][0]["x2"] == pytest.approx(before["edges"][0]["x2"])

    @pytest.mark.asyncio
    async def test_drag_move_without_start(self, tools: dict) -> None:
        """A move outside a drag is ignored."""
        await tools["dissonance_create_session"](name="test")
        await tools["dissonance_toggle_key"](session="test", key="c3")
        data = json.loads(await tools["dissonance_drag_move"](session="test", node_id=1, x=5, y=5))
        assert data["status"] == "success"
        assert data["delta"] is None

    @pytest.mark.asyncio
    async def test_drag_unknown_node(self, tools: dict) -> None:
        """Dragging a missing node is an error."""
        await tools["dissonance_create_session"](name="test")
        data = json.loads(await tools["dissonance_drag_start"](session="test", node_id=3, x=0, y=0))
        assert data["status"] == "error"
