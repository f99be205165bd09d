"""
Tests for Socket.IO room subscription handlers.
"""

from unittest.mock import patch

import pytest

from apps.realtime.server import create_socket_server


@pytest.fixture
def server():
    return create_socket_server("*")


def handler(server, event: str):
    return server.handlers["/"][event]


class TestRoomHandlers:
    """Tests for join/leave handlers."""

    def test_join_enters_organization_room(self, server) -> None:
        with patch.object(server, "enter_room") as enter_room:
            handler(server, "join:organization")("sid_1", "org_1")

        enter_room.assert_called_once_with("sid_1", "org:org_1")

    def test_join_without_organization_is_ignored(self, server) -> None:
        with patch.object(server, "enter_room") as enter_room:
            handler(server, "join:organization")("sid_1", "")

        enter_room.assert_not_called()

    def test_leave_leaves_organization_room(self, server) -> None:
        with patch.object(server, "leave_room") as leave_room:
            handler(server, "leave:organization")("sid_1", "org_1")

        leave_room.assert_called_once_with("sid_1", "org:org_1")

    def test_connect_and_disconnect_registered(self, server) -> None:
        assert handler(server, "connect")("sid_1", {}) is None
        assert handler(server, "disconnect")("sid_1") is None
