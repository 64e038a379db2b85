import json
import logging
import requests

from . import settings
from .messaging import format_quantity
from .schemas import CartItem, Product, Supplier

logger = logging.getLogger(__name__)

NO_API_KEY_MESSAGE = "API Key no configurada."
EMPTY_ANALYSIS_MESSAGE = "No se pudo generar el análisis."
CONNECTION_ERROR_MESSAGE = "Error al conectar con el asistente."

STOCK_ANALYSIS_PROMPT = """Actúa como un Bar Manager experto y Mixólogo. Analiza el siguiente inventario de mi barra y dame 3 consejos breves.

Considera:
1. Stock crítico de espirituosas base (Gin, Vodka, Ron, Whisky).
2. Balance entre mixers (tónicas, gaseosas) y alcohol.
3. Sugiere un "Cóctel del Día" para mover stock que esté alto.

Formato: Lista con viñetas, estilo directo y "con onda" de bartender profesional.
Inventario: {stock_data}"""

ORDER_DRAFT_PROMPT = """Escribe un mensaje de WhatsApp para pedir bebidas a un proveedor.
Proveedor: {supplier_name}
Items: {order_details}
Rol: Soy el encargado de la barra.
Estilo: Breve, profesional, como se habla en el rubro gastronómico. Sin saludos robóticos."""


class AssistantError(Exception):
    """Raised when the text-generation API cannot be reached or answers badly."""


def generate_text(prompt: str) -> str:
    """
    Sends a single prompt to the Gemini generateContent endpoint and returns the
    text of the first candidate ("" if the model answered with nothing).
    """
    url = f"{settings.GEMINI_API_URL}/{settings.GEMINI_MODEL}:generateContent"
    payload = {"contents": [{"parts": [{"text": prompt}]}]}

    try:
        response = requests.post(
            url,
            params={"key": settings.GEMINI_API_KEY},
            json=payload,
            timeout=settings.REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        data = response.json()
    except (requests.exceptions.RequestException, ValueError) as e:
        raise AssistantError(str(e)) from e

    if not isinstance(data, dict):
        raise AssistantError("Unexpected response from the assistant API.")

    candidates = data.get("candidates") or []
    if not candidates:
        return ""
    try:
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(part.get("text") or "" for part in parts).strip()
    except (AttributeError, TypeError, KeyError, IndexError) as e:
        raise AssistantError(f"Unexpected response shape from the assistant API: {e}") from e


def generate_stock_analysis(products: list[Product]) -> str:
    """
    Asks the assistant for quick restock advice on the whole catalog.
    Always returns something displayable; failures become a message.
    """
    if not settings.GEMINI_API_KEY:
        return NO_API_KEY_MESSAGE

    stock_data = json.dumps(
        [p.model_dump(mode="json", by_alias=True) for p in products], ensure_ascii=False
    )
    try:
        advice = generate_text(STOCK_ANALYSIS_PROMPT.format(stock_data=stock_data))
    except AssistantError as e:
        logger.error(f"❌ Error generating stock analysis: {e}")
        return CONNECTION_ERROR_MESSAGE

    return advice or EMPTY_ANALYSIS_MESSAGE


def draft_order_message(supplier: Supplier, items: list[CartItem], products: list[Product]) -> str:
    """
    Drafts a WhatsApp order for the supplier.
    Returns "" when nothing could be drafted, so the caller uses the plain template.
    """
    if not settings.GEMINI_API_KEY:
        return ""

    catalog = {p.id: p for p in products}
    details = []
    for item in items:
        product = catalog.get(item.product_id)
        name = product.name if product else "Producto"
        unit = product.unit if product else ""
        details.append(f"{name}: {format_quantity(item.order_quantity)} {unit}".strip())

    prompt = ORDER_DRAFT_PROMPT.format(
        supplier_name=supplier.name, order_details=", ".join(details)
    )
    try:
        return generate_text(prompt)
    except AssistantError as e:
        logger.error(f"❌ Error drafting order message: {e}")
        return ""
