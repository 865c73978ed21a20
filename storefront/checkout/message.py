"""
Order message rendering.

Turns a cart snapshot plus store settings into the human-readable order
text (WhatsApp markdown) and the link that opens a chat with the store
pre-filled with that text.
"""
import re
from dataclasses import dataclass
from typing import List, Optional
from urllib.parse import quote

from storefront.cart import CartSnapshot, CartLine
from storefront.config import DEFAULT_STORE_NAME, MESSAGING_URI_TEMPLATE
from storefront.errors import MissingRecipient
from storefront.models import StoreSettings
from storefront.services.currency import CurrencyFormatter

DIVIDER = "------------------------------"

FOOTER_LINES = [
    "Taxa de entrega: A calcular",
    "Horário de entrega: A combinar",
    "",
    "Aguardo confirmação!",
]

# Characters encodeURIComponent leaves alone besides alphanumerics
_URI_SAFE = "-_.!~*'()"

_NON_DIGITS = re.compile(r"\D")


def normalize_recipient(contact: Optional[str]) -> str:
    """Digits-only form of a phone number: "(11) 99999-9999" -> "11999999999"."""
    return _NON_DIGITS.sub("", contact or "")


@dataclass(frozen=True)
class OrderMessage:
    text: str
    uri: str
    recipient: str


class OrderMessageBuilder:
    """Renders order text and channel URI. Pure: never dispatches anything."""

    def __init__(
        self,
        formatter: Optional[CurrencyFormatter] = None,
        uri_template: str = MESSAGING_URI_TEMPLATE,
        default_store_name: str = DEFAULT_STORE_NAME,
    ) -> None:
        self.formatter = formatter or CurrencyFormatter()
        self.uri_template = uri_template
        self.default_store_name = default_store_name

    def build(self, snapshot: CartSnapshot, settings: StoreSettings) -> OrderMessage:
        """
        Render the order message for a snapshot.

        Raises:
            MissingRecipient: settings carry no contact with at least one digit
        """
        recipient = normalize_recipient(settings.contact_identifier)
        if not recipient:
            raise MissingRecipient()

        text = self.render_text(snapshot, settings)
        uri = self.uri_template.format(recipient=recipient, text=quote(text, safe=_URI_SAFE))
        return OrderMessage(text=text, uri=uri, recipient=recipient)

    def render_text(self, snapshot: CartSnapshot, settings: StoreSettings) -> str:
        store_name = (settings.store_name or "").strip() or self.default_store_name

        lines = [f"*Novo Pedido - {store_name}*", "", DIVIDER]
        for line in snapshot.lines:
            lines.extend(self._render_line(line))
        lines.extend([
            DIVIDER,
            f"*Valor Total: {self.formatter.format(snapshot.total_price)}*",
            DIVIDER,
            "",
        ])
        lines.extend(FOOTER_LINES)
        return "\n".join(lines)

    def _render_line(self, line: CartLine) -> List[str]:
        title = f"{line.quantity}x {line.product.name}"
        if line.variant is not None:
            title += f" ({line.variant.name})"

        rendered = [f"*{title}*"]
        if line.explicit_size:
            rendered.append(f"   (Tamanho: {line.explicit_size})")
        rendered.append(f"   Unitário: {self.formatter.format(line.unit_price)}")
        rendered.append(f"   Subtotal: {self.formatter.format(line.total_price)}")
        rendered.append("")
        return rendered
