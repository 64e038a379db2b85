import argparse
import logging

from barstock import data_handler, settings
from barstock.ledger import Ledger
from barstock.logger import setup_logger
from barstock.orders import OrderDesk

logger = logging.getLogger(__name__)


def parse_item(raw: str) -> tuple[str, float]:
    """'g1=3' -> ('g1', 3.0); a bare id orders one unit."""
    product_id, _, quantity = raw.partition("=")
    try:
        return product_id.strip(), float(quantity) if quantity else 1.0
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid quantity in '{raw}'")


def show_status(ledger: Ledger, query: str = ""):
    products = ledger.search(query) if query else ledger.products
    df = data_handler.stock_dataframe(products)
    logger.info(df.to_string(index=False))

    counts = ledger.status_counts()
    logger.info(
        "\n" + " | ".join(f"{status.label}: {count}" for status, count in counts.items())
    )


def show_suppliers(ledger: Ledger):
    for supplier in ledger.suppliers:
        scope = (
            f"{len(supplier.product_ids)} products"
            if supplier.product_ids
            else "all products"
        )
        logger.info(
            f"[{supplier.id}] {supplier.name} ({supplier.phone}) - {supplier.description} - {scope}"
        )


def place_order(ledger: Ledger, supplier_id: str, items: list[tuple[str, float]], open_link: bool):
    ledger.select_supplier(supplier_id)
    if ledger.selected_supplier_id != supplier_id:
        return

    available = {p.id for p in ledger.available_products()}
    for product_id, quantity in items:
        if product_id not in available:
            logger.warning(f"⚠️ '{product_id}' is not available for this order. Skipping.")
            continue
        ledger.add_to_cart(product_id)
        ledger.set_cart_quantity(product_id, quantity)

    desk = OrderDesk(ledger) if open_link else OrderDesk(ledger, open_link=lambda url: None)
    result = desk.send_order()
    if result is None:
        logger.error("❌ Order was not sent.")
        return

    logger.info("\n--- Order ---")
    logger.info(result.message)
    if result.url:
        logger.info(f"\n{result.url}")
    if result.document_path:
        logger.info(f"\nDocument: {result.document_path}")


def main():
    setup_logger()

    parser = argparse.ArgumentParser(description="Bar stock tracking and restock orders.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    status_parser = subparsers.add_parser("status", help="Show stock levels")
    status_parser.add_argument("--search", default="", help="Filter products by name")

    subparsers.add_parser("suppliers", help="List suppliers")
    subparsers.add_parser("report", help="Save the stock report to OUTPUT_DIR")
    subparsers.add_parser("advise", help="Ask the assistant for restock advice")

    order_parser = subparsers.add_parser("order", help="Send a restock order")
    order_parser.add_argument(
        "--supplier",
        required=True,
        help=f"Supplier id, or '{settings.GENERAL_ORDER_ID}' to export a document",
    )
    order_parser.add_argument(
        "items", nargs="+", type=parse_item, help="Product ids, optionally with =QTY"
    )
    order_parser.add_argument(
        "--no-open", action="store_true", help="Print the WhatsApp link instead of opening it"
    )

    args = parser.parse_args()
    ledger = Ledger.with_defaults()

    if args.command == "status":
        show_status(ledger, args.search)
    elif args.command == "suppliers":
        show_suppliers(ledger)
    elif args.command == "report":
        data_handler.save_stock_report(ledger.products)
    elif args.command == "advise":
        logger.info(OrderDesk(ledger).analyze_stock())
    elif args.command == "order":
        place_order(ledger, args.supplier, args.items, open_link=not args.no_open)


if __name__ == "__main__":
    main()
