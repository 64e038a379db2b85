import logging
import webbrowser
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from . import advisor, data_handler, messaging
from .ledger import Ledger

logger = logging.getLogger(__name__)

MANUAL_SHARE_MESSAGE = "Documento guardado. Puedes enviarlo manualmente por WhatsApp."


@dataclass
class OrderResult:
    """What happened to a dispatched order."""

    message: str
    url: Optional[str] = None
    document_path: Optional[Path] = None
    shared: bool = False


class OrderDesk:
    """
    Runs the outbound side of an order for a Ledger: drafting and opening the
    supplier message, or exporting and sharing the general order document.

    Only one outbound call runs at a time. While one is in flight `busy` is
    True and further requests are refused (the UI greys out its buttons).
    Calls here are synchronous, so the flag only matters to a front end that
    runs them off its event thread, or to an open_link that calls back in.
    """

    def __init__(self, ledger: Ledger, open_link: Callable[[str], object] = webbrowser.open):
        self.ledger = ledger
        self.open_link = open_link
        self.busy = False

    def send_order(self) -> Optional[OrderResult]:
        """
        Sends the current cart to the selected target.
        Returns None when nothing was sent (busy, empty cart, no target, export failure);
        in that case the cart is untouched.
        """
        if self.busy:
            logger.warning("⚠️ An order is already being sent. Ignoring request.")
            return None
        if not self.ledger.cart:
            logger.warning("⚠️ Cart is empty. Nothing to send.")
            return None

        self.busy = True
        try:
            if self.ledger.is_general_order:
                return self._export_general_order()
            return self._message_supplier()
        finally:
            self.busy = False

    def analyze_stock(self) -> Optional[str]:
        """Restock advice for the current catalog, or None if a call is already running."""
        if self.busy:
            logger.warning("⚠️ Assistant is busy. Ignoring request.")
            return None
        self.busy = True
        try:
            return advisor.generate_stock_analysis(self.ledger.products)
        finally:
            self.busy = False

    def _message_supplier(self) -> Optional[OrderResult]:
        supplier = self.ledger.selected_supplier
        if supplier is None:
            logger.warning("⚠️ No supplier selected. Nothing to send.")
            return None

        message = advisor.draft_order_message(supplier, self.ledger.cart, self.ledger.products)
        if not message:
            message = messaging.build_fallback_message(supplier, self.ledger.order_summary())

        url = messaging.build_whatsapp_url(supplier.phone, message)
        logger.info(f"Opening WhatsApp order for {supplier.name}.")
        self.open_link(url)
        self.ledger.clear_cart()
        return OrderResult(message=message, url=url)

    def _export_general_order(self) -> Optional[OrderResult]:
        lines = self.ledger.order_summary()
        try:
            document_path = data_handler.export_order_document(lines)
        except OSError as e:
            logger.error(f"❌ Could not generate the order document: {e}")
            return None

        shared = data_handler.share_order_document(lines, document_path)
        # Either shared, or the saved file is handed over for manual sending
        self.ledger.clear_cart()
        message = "Pedido compartido." if shared else MANUAL_SHARE_MESSAGE
        return OrderResult(message=message, document_path=document_path, shared=shared)
