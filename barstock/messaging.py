from urllib.parse import quote

from . import settings
from .schemas import OrderLine, Supplier

# Same characters a browser's encodeURIComponent leaves alone
URL_SAFE_CHARS = "!~*'()"


def format_quantity(quantity: float) -> str:
    """Renders 2.0 as '2' and 1.5 as '1.5'."""
    if float(quantity).is_integer():
        return str(int(quantity))
    return str(quantity)


def format_order_lines(lines: list[OrderLine]) -> str:
    return "\n".join(
        f"- {line.product_name}: {format_quantity(line.order_quantity)} {line.unit}"
        for line in lines
    )


def build_fallback_message(supplier: Supplier, lines: list[OrderLine]) -> str:
    """Plain order message used when no drafted text is available."""
    return (
        f"Hola {supplier.name}, te paso el pedido de la semana:\n\n"
        f"{format_order_lines(lines)}\n\n"
        "Saludos."
    )


def build_whatsapp_url(phone: str, message: str) -> str:
    """Click-to-chat link for the supplier's phone with the message pre-filled."""
    return f"{settings.WHATSAPP_BASE_URL}/{phone}?text={quote(message, safe=URL_SAFE_CHARS)}"
