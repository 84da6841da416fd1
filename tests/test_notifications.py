"""Tests for the single-slot notification channel."""

import asyncio

import pytest

from constants import NOTIFICATION_TIMEOUT
from controller import NotificationChannel
from model import Notification, Severity


def test_default_timeout_is_six_seconds():
    assert NotificationChannel().timeout == NOTIFICATION_TIMEOUT == 6.0


def test_starts_empty():
    channel = NotificationChannel()
    assert channel.current is None
    assert channel.visible is False


class TestShow:
    """Test show() and the severity helpers."""

    @pytest.mark.asyncio
    async def test_show_fills_slot(self, notifications):
        notifications.success("Operator added successfully")
        assert notifications.current == Notification("Operator added successfully", Severity.SUCCESS)
        assert notifications.visible is True

    @pytest.mark.asyncio
    async def test_new_notification_replaces_visible_one(self, notifications):
        notifications.error("first")
        notifications.warning("second")
        assert notifications.current.message == "second"
        assert notifications.current.severity is Severity.WARNING

    @pytest.mark.asyncio
    async def test_listeners_see_every_change(self, notifications):
        seen = []
        notifications.subscribe(seen.append)
        notifications.info("hello")
        notifications.dismiss()
        assert seen == [Notification("hello", Severity.INFO), None]

    @pytest.mark.asyncio
    async def test_unsubscribe(self, notifications):
        seen = []
        unsubscribe = notifications.subscribe(seen.append)
        unsubscribe()
        notifications.info("hello")
        assert seen == []


class TestDismiss:
    """Test auto and explicit dismissal."""

    @pytest.mark.asyncio
    async def test_auto_dismiss_after_timeout(self, fast_notifications):
        fast_notifications.success("done")
        await asyncio.sleep(0.15)
        assert fast_notifications.current is None

    @pytest.mark.asyncio
    async def test_replacement_restarts_timer(self):
        channel = NotificationChannel(timeout=0.2)
        channel.info("first")
        await asyncio.sleep(0.12)
        channel.info("second")
        await asyncio.sleep(0.12)
        # First timer would have fired by now; second is still pending
        assert channel.current.message == "second"
        await asyncio.sleep(0.3)
        assert channel.current is None

    @pytest.mark.asyncio
    async def test_explicit_dismiss(self, notifications):
        notifications.error("boom")
        notifications.dismiss()
        assert notifications.current is None

    @pytest.mark.asyncio
    async def test_dismiss_when_empty_is_silent(self, notifications):
        seen = []
        notifications.subscribe(seen.append)
        notifications.dismiss()
        assert seen == []
