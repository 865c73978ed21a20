"""Checkout: settings fetch, message build, hand-off."""
from typing import Optional, Protocol

from storefront.cart import CartStore
from storefront.errors import EmptyCart, SettingsFetchFailed
from storefront.logging import get_logger, sanitize_string_for_logging
from storefront.models import StoreSettings
from .message import OrderMessage, OrderMessageBuilder

logger = get_logger(__name__)


class SettingsSource(Protocol):
    async def get_settings(self) -> StoreSettings: ...


class MessagingChannel(Protocol):
    """Delivers a finished order URI (opens the chat app, redirects the browser...)."""

    async def dispatch(self, message: OrderMessage) -> None: ...


class CheckoutService:
    """
    Builds the order message for a cart and hands it to the messaging channel.

    Checkout only reads the cart. Every failure (settings unavailable, no
    contact number, empty cart) leaves the cart as it was so the shopper can
    retry.
    """

    def __init__(
        self,
        catalog: SettingsSource,
        builder: Optional[OrderMessageBuilder] = None,
        channel: Optional[MessagingChannel] = None,
    ) -> None:
        self.catalog = catalog
        self.builder = builder or OrderMessageBuilder()
        self.channel = channel

    async def checkout(self, cart: CartStore) -> OrderMessage:
        """
        Raises:
            EmptyCart: nothing to order
            SettingsFetchFailed: store settings could not be read
            MissingRecipient: the store has no contact number
        """
        if cart.snapshot().is_empty:
            raise EmptyCart()

        try:
            settings = await self.catalog.get_settings()
        except SettingsFetchFailed:
            raise
        except Exception as e:
            logger.error(f"Failed to fetch store settings for checkout: {e}")
            raise SettingsFetchFailed() from e

        # Snapshot after the await so the message reflects the cart at build time
        snapshot = cart.snapshot()
        if snapshot.is_empty:
            raise EmptyCart()

        message = self.builder.build(snapshot, settings)
        logger.info(
            f"Checkout message built: items={snapshot.total_items} "
            f"recipient={sanitize_string_for_logging(message.recipient, max_length=4)}"
        )

        if self.channel is not None:
            await self.channel.dispatch(message)

        return message
