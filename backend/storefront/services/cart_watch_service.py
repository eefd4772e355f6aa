"""
Cart Count Watcher
Realtime cart badge: listens to postgres_changes on cart_items for one user
and pushes the recomputed item count on every change.

Author: Uday
Date: 2025-10-31
"""
import asyncio
import logging
import uuid
from typing import Awaitable, Callable, Optional, Set

from supabase import AsyncClient

logger = logging.getLogger(__name__)

OnCountChange = Callable[[int], Awaitable[None]]


class CartCountWatcher:
    """
    Subscribes to cart_items changes of a single user.

    Usage:
        watcher = CartCountWatcher(client, user.id, send_count)
        await watcher.start()      # pushes the initial count
        ...
        await watcher.stop()
    """

    def __init__(self, client: AsyncClient, user_id: str, on_change: OnCountChange):
        self.client = client
        self.user_id = user_id
        self.on_change = on_change
        self.channel = None
        self._pending: Set[asyncio.Task] = set()

    @property
    def topic(self) -> str:
        return f"cart-changes:{self.user_id}"

    async def count(self) -> int:
        """Sum of quantities in the user's cart"""
        response = await (
            self.client.table("cart_items")
            .select("quantity")
            .eq("user_id", self.user_id)
            .execute()
        )
        return sum(row["quantity"] for row in response.data or [])

    async def refresh(self) -> int:
        count = await self.count()
        await self.on_change(count)
        return count

    def _handle_change(self, payload: Optional[dict] = None) -> None:
        """Realtime callback; runs inside the realtime listener loop"""
        logger.debug("cart_items change for user %s: %s", self.user_id, payload)

        task = asyncio.ensure_future(self._safe_refresh())
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _safe_refresh(self) -> None:
        try:
            await self.refresh()
        except Exception as e:
            logger.error(f"Error loading cart count for user {self.user_id}: {e}")

    async def start(self) -> int:
        """
        Push the current count, then subscribe to changes

        Returns:
            The initial count
        """
        initial = await self.refresh()

        # channel topics must be unique per subscription on a shared client
        self.channel = self.client.channel(f"{self.topic}:{uuid.uuid4().hex[:8]}")
        self.channel.on_postgres_changes(
            "*",
            schema="public",
            table="cart_items",
            filter=f"user_id=eq.{self.user_id}",
            callback=self._handle_change,
        )
        await self.channel.subscribe()
        logger.info("Subscribed to cart changes for user %s", self.user_id)
        return initial

    async def stop(self) -> None:
        """Remove the realtime channel and drop pending refreshes"""
        for task in list(self._pending):
            task.cancel()
        self._pending.clear()

        if self.channel is not None:
            await self.client.remove_channel(self.channel)
            self.channel = None
            logger.info("Unsubscribed from cart changes for user %s", self.user_id)
