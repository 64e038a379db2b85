import logging
import uuid
from typing import Any, Callable, Iterable, Optional
from pydantic import BaseModel, ValidationError

from . import settings, seed
from .schemas import CartItem, OrderLine, Product, StockStatus, Supplier

logger = logging.getLogger(__name__)

# Receives the question to show the user, returns True to go ahead.
ConfirmFunc = Callable[[str], bool]

DELETE_PRODUCT_PROMPT = "¿Estás seguro de eliminar esta bebida del inventario?"
DELETE_SUPPLIER_PROMPT = "¿Eliminar proveedor?"


# --- Pure stock helpers ---


def fill_percentage(product: Product) -> float:
    """Quantity as a percentage of max capacity, clamped to [0, 100] for display."""
    percentage = (product.quantity / product.max_capacity) * 100
    return min(100.0, max(0.0, percentage))


def stock_status(product: Product) -> StockStatus:
    """
    Traffic-light status of a product.
    - CRITICAL: quantity at or below the min stock alert, whatever the fill level.
    - LOW: above the alert but filled to LOW_STOCK_PERCENT or less.
    - OK: everything else.
    """
    if product.quantity <= product.min_stock_alert:
        return StockStatus.CRITICAL
    if (product.quantity / product.max_capacity) * 100 <= settings.LOW_STOCK_PERCENT:
        return StockStatus.LOW
    return StockStatus.OK


def adjusted_quantity(quantity: float, delta: float) -> float:
    """Applies a stock delta, flooring at zero and rounding to 2 decimals."""
    return round(max(0, quantity + delta), 2)


def filter_by_supplier(products: Iterable[Product], supplier: Optional[Supplier]) -> list[Product]:
    """
    Products a supplier can be asked for, in catalog order.

    NOTE: an empty product_ids list means the supplier carries EVERYTHING,
    not nothing. New suppliers start that way until products are assigned.
    """
    if supplier is None:
        return []
    if not supplier.product_ids:
        return list(products)
    wanted = set(supplier.product_ids)
    return [p for p in products if p.id in wanted]


def search_products(products: Iterable[Product], query: str) -> list[Product]:
    """Case-insensitive substring match on the product name."""
    needle = (query or "").lower()
    return [p for p in products if needle in p.name.lower()]


def _by_field_name(model: type[BaseModel], data: dict[str, Any]) -> dict[str, Any]:
    # Form data may use either the camelCase aliases or the field names
    alias_map = {
        info.alias: name for name, info in model.model_fields.items() if info.alias
    }
    return {alias_map.get(key, key): value for key, value in data.items() if key != "id"}


class Ledger:
    """
    Application state for one bar: product catalog, supplier registry and the
    in-progress order cart for the selected supplier.

    Every command is total. Bad ids, rejected forms and out-of-range quantities
    are logged and ignored instead of raising, so a front end can issue commands
    straight from user input and re-render from the resulting state.
    """

    def __init__(
        self,
        products: Optional[Iterable[Product]] = None,
        suppliers: Optional[Iterable[Supplier]] = None,
    ):
        self._products: list[Product] = list(products or [])
        self._suppliers: list[Supplier] = list(suppliers or [])
        self._cart: list[CartItem] = []
        self.selected_supplier_id: Optional[str] = None

    @classmethod
    def with_defaults(cls) -> "Ledger":
        """A ledger pre-loaded with the starting bar catalog and suppliers."""
        return cls(seed.default_products(), seed.default_suppliers())

    # --- Catalog ---

    @property
    def products(self) -> list[Product]:
        return list(self._products)

    def get_product(self, product_id: str) -> Optional[Product]:
        return next((p for p in self._products if p.id == product_id), None)

    def save_product(self, data: dict[str, Any], product_id: Optional[str] = None) -> Optional[Product]:
        """
        Creates a product, or edits the one with `product_id`.
        Returns the saved product, or None if the form data was rejected.
        """
        fields = _by_field_name(Product, data)

        if product_id is not None:
            existing = self.get_product(product_id)
            if existing is None:
                logger.warning(f"Product '{product_id}' not found. Nothing to edit.")
                return None
            fields = {**existing.model_dump(exclude={"id"}), **fields}
        else:
            product_id = str(uuid.uuid4())

        if not fields.get("name"):
            logger.warning("Product not saved: a name is required.")
            return None

        try:
            product = Product(id=product_id, **fields)
        except ValidationError as e:
            logger.warning(f"Product not saved, invalid data: {e}")
            return None

        self._replace_or_append(self._products, product)
        logger.debug(f"Saved product {product.id} ({product.name}).")
        return product

    def delete_product(self, product_id: str, confirm: ConfirmFunc) -> bool:
        """
        Removes a product once the user confirms.
        Cart lines pointing at it are left alone; the order summary skips them.
        """
        if self.get_product(product_id) is None:
            return False
        if not confirm(DELETE_PRODUCT_PROMPT):
            logger.info("Product deletion cancelled.")
            return False
        self._products = [p for p in self._products if p.id != product_id]
        logger.info(f"Deleted product {product_id}.")
        return True

    def adjust_quantity(self, product_id: str, delta: float) -> Optional[float]:
        """Quick +/- on stock. Returns the new quantity, or None for an unknown product."""
        product = self.get_product(product_id)
        if product is None:
            logger.debug(f"Ignoring stock update for unknown product '{product_id}'.")
            return None
        product.quantity = adjusted_quantity(product.quantity, delta)
        return product.quantity

    def search(self, query: str) -> list[Product]:
        return search_products(self._products, query)

    def status_counts(self) -> dict[StockStatus, int]:
        counts = {status: 0 for status in StockStatus}
        for product in self._products:
            counts[stock_status(product)] += 1
        return counts

    # --- Suppliers ---

    @property
    def suppliers(self) -> list[Supplier]:
        return list(self._suppliers)

    def get_supplier(self, supplier_id: str) -> Optional[Supplier]:
        return next((s for s in self._suppliers if s.id == supplier_id), None)

    def save_supplier(self, data: dict[str, Any], supplier_id: Optional[str] = None) -> Optional[Supplier]:
        """Creates or edits a supplier. Name and phone are both required."""
        fields = _by_field_name(Supplier, data)

        if supplier_id is not None:
            existing = self.get_supplier(supplier_id)
            if existing is None:
                logger.warning(f"Supplier '{supplier_id}' not found. Nothing to edit.")
                return None
            fields = {**existing.model_dump(exclude={"id"}), **fields}
        else:
            supplier_id = str(uuid.uuid4())

        if not fields.get("name") or not fields.get("phone"):
            logger.warning("Supplier not saved: name and phone are required.")
            return None

        try:
            supplier = Supplier(id=supplier_id, **fields)
        except ValidationError as e:
            logger.warning(f"Supplier not saved, invalid data: {e}")
            return None

        self._replace_or_append(self._suppliers, supplier)
        return supplier

    def delete_supplier(self, supplier_id: str, confirm: ConfirmFunc) -> bool:
        if self.get_supplier(supplier_id) is None:
            return False
        if not confirm(DELETE_SUPPLIER_PROMPT):
            logger.info("Supplier deletion cancelled.")
            return False
        self._suppliers = [s for s in self._suppliers if s.id != supplier_id]
        if self.selected_supplier_id == supplier_id:
            self.select_supplier(None)
        logger.info(f"Deleted supplier {supplier_id}.")
        return True

    def toggle_supplier_product(self, supplier_id: str, product_id: str) -> Optional[Supplier]:
        """Adds the product to the supplier's list, or removes it if already there."""
        supplier = self.get_supplier(supplier_id)
        if supplier is None:
            return None
        if product_id in supplier.product_ids:
            supplier.product_ids = [pid for pid in supplier.product_ids if pid != product_id]
        else:
            supplier.product_ids = [*supplier.product_ids, product_id]
        return supplier

    # --- Order target ---

    @property
    def is_general_order(self) -> bool:
        return self.selected_supplier_id == settings.GENERAL_ORDER_ID

    @property
    def selected_supplier(self) -> Optional[Supplier]:
        if self.selected_supplier_id is None or self.is_general_order:
            return None
        return self.get_supplier(self.selected_supplier_id)

    def select_supplier(self, supplier_id: Optional[str]) -> None:
        """
        Picks who the order is for: a supplier id, GENERAL_ORDER_ID or None.
        Changing the target discards the cart, since each target sees a different catalog.
        """
        if (
            supplier_id is not None
            and supplier_id != settings.GENERAL_ORDER_ID
            and self.get_supplier(supplier_id) is None
        ):
            logger.warning(f"Unknown supplier '{supplier_id}'. Selection unchanged.")
            return
        if supplier_id != self.selected_supplier_id:
            self.clear_cart()
        self.selected_supplier_id = supplier_id

    def available_products(self) -> list[Product]:
        if self.is_general_order:
            return self.products
        return filter_by_supplier(self._products, self.selected_supplier)

    # --- Cart ---

    @property
    def cart(self) -> list[CartItem]:
        return list(self._cart)

    def _cart_item(self, product_id: str) -> Optional[CartItem]:
        return next((item for item in self._cart if item.product_id == product_id), None)

    def add_to_cart(self, product_id: str) -> None:
        """Adds one unit of a product. Adding it again does not bump the quantity."""
        if self.get_product(product_id) is None:
            logger.debug(f"Ignoring unknown product '{product_id}' for the cart.")
            return
        if self._cart_item(product_id) is None:
            self._cart.append(CartItem(product_id=product_id, order_quantity=1))

    def remove_from_cart(self, product_id: str) -> None:
        self._cart = [item for item in self._cart if item.product_id != product_id]

    def set_cart_quantity(self, product_id: str, quantity: float) -> None:
        # Written so NaN is rejected too
        if not quantity >= 1:
            return
        item = self._cart_item(product_id)
        if item is not None:
            item.order_quantity = quantity

    def clear_cart(self) -> None:
        self._cart = []

    def order_summary(self) -> list[OrderLine]:
        """
        (name, quantity, unit) lines in the order items were added.
        Items whose product has since been deleted are skipped.
        """
        lines = []
        for item in self._cart:
            product = self.get_product(item.product_id)
            if product is None:
                continue
            lines.append(OrderLine(product.name, item.order_quantity, product.unit))
        return lines

    @staticmethod
    def _replace_or_append(items: list, new_item) -> None:
        for i, item in enumerate(items):
            if item.id == new_item.id:
                items[i] = new_item
                return
        items.append(new_item)
