"""Tests for the ConsoleTransport module."""

import io

import pytest
from button_pager.core import ControlKind, Embed, PaginationButtons
from button_pager.errors import TransportError
from button_pager.interfaces import InteractionEvent, Message
from button_pager.transport.console_transport import ConsoleTransport, format_message


class TestConsoleTransport:
    """Tests for ConsoleTransport."""

    @pytest.fixture
    def stream(self):
        return io.StringIO()

    @pytest.fixture
    def console(self, stream):
        return ConsoleTransport(stream=stream)

    def test_send_assigns_sequential_ids(self, console):
        """Each sent message gets the next id."""
        first = console.send_message("c1", "one")
        second = console.send_message("c1", "two")
        assert (first.id, second.id) == ("1", "2")

    def test_send_writes_render(self, console, stream):
        """Sending a message prints it."""
        console.send_message("c1", "hello", controls=PaginationButtons().row())
        output = stream.getvalue()
        assert "hello" in output
        assert "[<<] [<] [stop] [>] [>>]" in output

    def test_edit_replaces_message(self, console):
        """edit_message updates what fetch_message returns."""
        message = console.send_message("c1", "one")
        console.edit_message(message.id, "two")
        assert console.fetch_message(message.id).content == "two"

    def test_delete_removes_message(self, console, stream):
        """A deleted message can no longer be fetched."""
        message = console.send_message("c1", "one")
        console.delete_message(message.id)
        assert "deleted" in stream.getvalue()
        with pytest.raises(TransportError):
            console.fetch_message(message.id)

    def test_unknown_message_raises(self, console):
        """Editing or deleting an unknown message is a transport error."""
        with pytest.raises(TransportError):
            console.edit_message("404", "x")
        with pytest.raises(TransportError):
            console.delete_message("404")

    def test_acknowledge_is_silent(self, console, stream):
        """Acknowledging prints nothing."""
        console.acknowledge(InteractionEvent(message_id="1", user_id="u", custom_id="stop"))
        assert stream.getvalue() == ""


class TestFormatMessage:
    """Tests for format_message."""

    def test_disabled_controls_in_parentheses(self):
        """Disabled controls are drawn in parentheses."""
        row = PaginationButtons().row({ControlKind.FIRST, ControlKind.PREVIOUS})
        text = format_message(Message(id="1", channel_id="c", content="x", controls=row))
        assert "(<<) (<) [stop] [>] [>>]" in text

    def test_embed_block(self):
        """Embeds are drawn as a prefixed block."""
        embed = Embed(title="Notes", description="line one\nline two", footer="Page 1/2")
        text = format_message(Message(id="1", channel_id="c", embeds=(embed,)))
        assert "| Notes" in text
        assert "| line two" in text
        assert "| -- Page 1/2" in text
