import html
import json
import logging
from pathlib import Path

import pandas as pd
import requests

from . import settings
from . import utils
from .ledger import fill_percentage, stock_status
from .messaging import format_quantity
from .schemas import OrderLine, Product

logger = logging.getLogger(__name__)

ORDER_SHEET_TEMPLATE = """<!DOCTYPE html>
<html lang="es">
<head>
<meta charset="utf-8">
<title>{title} - {heading}</title>
<style>
  body {{ font-family: Helvetica, Arial, sans-serif; color: #334155; margin: 0; }}
  header {{ background: #0f172a; color: #fff; padding: 16px 24px; display: flex; justify-content: space-between; }}
  header h1 {{ margin: 0; font-size: 24px; }}
  header p {{ margin: 4px 0 0; color: #c8c8c8; font-size: 12px; }}
  table {{ border-collapse: collapse; margin: 16px 24px; width: calc(100% - 48px); }}
  th {{ background: #f59e0b; color: #fff; padding: 8px; }}
  td {{ border: 1px solid #cbd5e1; padding: 8px; }}
  tbody tr:nth-child(even) {{ background: #f8fafc; }}
  footer {{ text-align: center; color: #969696; font-size: 11px; margin-top: 24px; }}
</style>
</head>
<body>
<header>
  <div><h1>{title}</h1><p>{subtitle}</p></div>
  <div><p>Fecha: {date} - Hora: {time}</p><p>{heading}</p></div>
</header>
{table}
<footer>{footer}</footer>
</body>
</html>
"""


def order_dataframe(lines: list[OrderLine]) -> pd.DataFrame:
    """Order summary as a PRODUCTO / CANTIDAD / UNIDAD table, in cart order."""
    rows = [
        [line.product_name, format_quantity(line.order_quantity), str(line.unit)]
        for line in lines
    ]
    return pd.DataFrame(rows, columns=settings.DOCUMENT_COLUMNS)


def export_order_document(lines: list[OrderLine]) -> Path:
    """
    Renders the order as a printable HTML sheet (plus a CSV copy) in OUTPUT_DIR.
    Returns the path of the HTML document. Disk errors propagate to the caller.
    """
    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    base_name = f"{settings.ORDER_FILENAME_PREFIX}{utils.get_timestamp_for_filename()}"
    html_path = settings.OUTPUT_DIR / f"{base_name}.html"
    csv_path = settings.OUTPUT_DIR / f"{base_name}.csv"

    df = order_dataframe(lines)
    date_str, time_str = utils.get_display_datetime()

    document = ORDER_SHEET_TEMPLATE.format(
        title=html.escape(settings.DOCUMENT_TITLE),
        subtitle=html.escape(settings.DOCUMENT_SUBTITLE),
        heading=html.escape(settings.DOCUMENT_HEADING),
        date=date_str,
        time=time_str,
        table=df.to_html(index=False, border=0),
        footer=html.escape(settings.DOCUMENT_FOOTER),
    )
    html_path.write_text(document, encoding="utf-8")
    df.to_csv(csv_path, index=False)

    logger.info(f"✅ Order document saved to: {html_path}")
    return html_path


def share_order_document(lines: list[OrderLine], document_path: Path) -> bool:
    """
    Shares the order through ORDER_WEBHOOK_URL.
    Returns False when there is no webhook or the post fails; the saved file is then the manual fallback.
    """
    if not settings.ORDER_WEBHOOK_URL:
        logger.warning("⚠️ ORDER_WEBHOOK_URL not set. Skipping share.")
        return False

    date_str, _ = utils.get_display_datetime()
    payload = {
        "title": "Pedido de Barra",
        "text": f"Adjunto lista de compra del {date_str}.",
        "fileName": document_path.name,
        "items": [
            {
                "product": line.product_name,
                "quantity": line.order_quantity,
                "unit": str(line.unit),
            }
            for line in lines
        ],
    }

    logger.info(f"🚀 Sharing order to webhook: {settings.ORDER_WEBHOOK_URL}")
    try:
        response = requests.post(
            settings.ORDER_WEBHOOK_URL, json=payload, timeout=settings.REQUEST_TIMEOUT
        )
        response.raise_for_status()
        logger.info("✅ Order successfully shared.")
        return True
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error sharing order: {e}")
        return False


def stock_dataframe(products: list[Product]) -> pd.DataFrame:
    """Catalog with fill percentage and traffic-light status for reporting."""
    records = []
    for product in products:
        status = stock_status(product)
        records.append(
            {
                "ID": product.id,
                "Product": product.name,
                "Quantity": product.quantity,
                "Max Capacity": product.max_capacity,
                "Unit": str(product.unit),
                "Min Stock Alert": product.min_stock_alert,
                "Fill %": round(fill_percentage(product)),
                "Status": status.label,
            }
        )
    return pd.DataFrame(
        records,
        columns=[
            "ID",
            "Product",
            "Quantity",
            "Max Capacity",
            "Unit",
            "Min Stock Alert",
            "Fill %",
            "Status",
        ],
    )


def save_stock_report(products: list[Product]) -> Path:
    """Saves the stock report to CSV and conditionally to JSON, with dated filenames."""
    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    csv_path = settings.OUTPUT_DIR / f"{settings.STOCK_REPORT_FILENAME_BASE}_{date_suffix}.csv"
    json_path = settings.OUTPUT_DIR / f"{settings.STOCK_REPORT_FILENAME_BASE}_{date_suffix}.json"

    stock_dataframe(products).to_csv(csv_path, index=False)
    logger.info(f"✅ Stock report saved to: {csv_path}")

    if settings.SAVE_JSON_OUTPUT:
        with open(json_path, "w", encoding="utf-8") as f:
            json_data = [p.model_dump(mode="json", by_alias=True) for p in products]
            json.dump(json_data, f, indent=2, ensure_ascii=False)
        logger.info(f"✅ JSON output saved to: {json_path}")
    else:
        logger.info("INFO: Skipping JSON file save as per configuration.")

    return csv_path
