"""Stock status, catalog filtering and cart tests for the ledger."""

import pytest

from barstock import settings
from barstock.ledger import (
    Ledger,
    adjusted_quantity,
    fill_percentage,
    filter_by_supplier,
    search_products,
    stock_status,
)
from barstock.schemas import OrderLine, Product, StockStatus, Supplier, UnitOfMeasure


def make_product(quantity, max_capacity=10, min_stock_alert=1, product_id="p"):
    return Product(
        id=product_id,
        name="Gin",
        quantity=quantity,
        max_capacity=max_capacity,
        min_stock_alert=min_stock_alert,
    )


class TestStockStatus:
    """Traffic-light classification."""

    def test_scenario_products(self, products):
        """A is critical, B is low at 30%, C is ok at 90%."""
        assert [stock_status(p) for p in products] == [
            StockStatus.CRITICAL,
            StockStatus.LOW,
            StockStatus.OK,
        ]

    def test_critical_at_alert_threshold(self):
        """Quantity equal to the alert is critical."""
        assert stock_status(make_product(3, min_stock_alert=3)) == StockStatus.CRITICAL

    def test_critical_wins_over_high_fill(self):
        """A 90% full product is still critical when the alert is set higher."""
        assert stock_status(make_product(9, min_stock_alert=9.5)) == StockStatus.CRITICAL

    def test_low_at_forty_percent(self):
        """Exactly 40% full is low."""
        assert stock_status(make_product(4)) == StockStatus.LOW

    def test_ok_just_above_forty_percent(self):
        """Anything over 40% is ok."""
        assert stock_status(make_product(4.1)) == StockStatus.OK

    def test_overstock_is_ok(self):
        """Quantities above capacity are allowed and ok."""
        assert stock_status(make_product(15)) == StockStatus.OK

    def test_threshold_follows_settings(self, monkeypatch):
        """The low threshold is configurable."""
        monkeypatch.setattr(settings, "LOW_STOCK_PERCENT", 50)
        assert stock_status(make_product(5)) == StockStatus.LOW

    @pytest.mark.parametrize(
        "quantity, min_alert, expected",
        [
            (0, 0, StockStatus.CRITICAL),
            (1, 0, StockStatus.LOW),
            (0.5, 1, StockStatus.CRITICAL),
            (6, 2, StockStatus.OK),
        ],
    )
    def test_classification_table(self, quantity, min_alert, expected):
        assert stock_status(make_product(quantity, min_stock_alert=min_alert)) == expected

    def test_status_labels(self):
        """Display labels shown next to each product."""
        assert StockStatus.CRITICAL.label == "REPONER"
        assert StockStatus.LOW.label == "STOCK BAJO"
        assert StockStatus.OK.label == "STOCK OK"


class TestFillPercentage:
    """Fill percentage for progress display."""

    def test_plain_percentage(self):
        assert fill_percentage(make_product(3)) == 30

    def test_clamped_on_overstock(self):
        assert fill_percentage(make_product(25)) == 100

    def test_empty_is_zero(self):
        assert fill_percentage(make_product(0)) == 0


class TestQuantityAdjustment:
    """Quick +/- stock updates."""

    def test_increment(self):
        assert adjusted_quantity(2, 1) == 3

    def test_never_negative(self):
        """A large decrement always lands exactly on zero."""
        assert adjusted_quantity(2, -1000) == 0
        assert adjusted_quantity(0, -1) == 0

    def test_partial_bottles_rounded(self):
        """Float drift is rounded away at two decimals."""
        assert adjusted_quantity(0.1, 0.2) == 0.3
        assert adjusted_quantity(0.5, -1) == 0

    def test_ledger_adjust_updates_product(self, ledger):
        assert ledger.adjust_quantity("a", -1) == 1
        assert ledger.get_product("a").quantity == 1

    def test_no_upper_bound(self, ledger):
        ledger.adjust_quantity("c", 5)
        assert ledger.get_product("c").quantity == 14

    def test_unknown_product_is_ignored(self, ledger):
        assert ledger.adjust_quantity("missing", 1) is None


class TestCatalogFilters:
    """Supplier scope and name search."""

    def test_empty_product_ids_means_all(self, products, suppliers):
        """A supplier without assigned products carries the whole catalog."""
        assert filter_by_supplier(products, suppliers[0]) == products

    def test_subset_keeps_catalog_order(self, products, suppliers):
        """Assigned products come back in catalog order, not assignment order."""
        result = filter_by_supplier(products, suppliers[1])
        assert [p.id for p in result] == ["a", "c"]

    def test_unknown_ids_are_ignored(self, products):
        supplier = Supplier(id="x", name="X", phone="1", product_ids=["zzz"])
        assert filter_by_supplier(products, supplier) == []

    def test_no_supplier_means_nothing(self, products):
        assert filter_by_supplier(products, None) == []

    def test_search_is_case_insensitive(self):
        catalog = [
            Product(id="1", name="Tanqueray", max_capacity=5),
            Product(id="2", name="Tanqueray 0,0", max_capacity=5),
            Product(id="3", name="Beefeater", max_capacity=5),
        ]
        assert [p.id for p in search_products(catalog, "tanq")] == ["1", "2"]
        assert [p.id for p in search_products(catalog, "EEF")] == ["3"]

    def test_empty_search_returns_everything(self, ledger):
        assert len(ledger.search("")) == 3


class TestOrderTarget:
    """Supplier selection and the general order."""

    def test_general_order_sees_full_catalog(self, ledger):
        ledger.select_supplier(settings.GENERAL_ORDER_ID)
        assert ledger.is_general_order
        assert ledger.selected_supplier is None
        assert len(ledger.available_products()) == 3

    def test_supplier_scope(self, ledger):
        ledger.select_supplier("licores")
        assert [p.id for p in ledger.available_products()] == ["a", "c"]

    def test_nothing_selected(self, ledger):
        assert ledger.available_products() == []

    def test_switching_supplier_clears_cart(self, ledger):
        ledger.select_supplier("acme")
        ledger.add_to_cart("a")
        ledger.select_supplier("licores")
        assert ledger.cart == []

    def test_reselecting_same_supplier_keeps_cart(self, ledger):
        ledger.select_supplier("acme")
        ledger.add_to_cart("a")
        ledger.select_supplier("acme")
        assert len(ledger.cart) == 1

    def test_unknown_supplier_is_ignored(self, ledger):
        ledger.select_supplier("acme")
        ledger.add_to_cart("a")
        ledger.select_supplier("nope")
        assert ledger.selected_supplier_id == "acme"
        assert len(ledger.cart) == 1


class TestCart:
    """Cart lines and the order summary."""

    def test_add_starts_at_one(self, ledger):
        ledger.add_to_cart("a")
        assert [(i.product_id, i.order_quantity) for i in ledger.cart] == [("a", 1)]

    def test_add_is_idempotent(self, ledger):
        """Adding twice leaves a single line at quantity 1."""
        ledger.add_to_cart("a")
        ledger.add_to_cart("a")
        assert [(i.product_id, i.order_quantity) for i in ledger.cart] == [("a", 1)]

    def test_add_unknown_product_is_ignored(self, ledger):
        ledger.add_to_cart("missing")
        assert ledger.cart == []

    def test_remove(self, ledger):
        ledger.add_to_cart("a")
        ledger.add_to_cart("b")
        ledger.remove_from_cart("a")
        ledger.remove_from_cart("not-there")
        assert [i.product_id for i in ledger.cart] == ["b"]

    def test_set_quantity(self, ledger):
        ledger.add_to_cart("a")
        ledger.set_cart_quantity("a", 4)
        assert ledger.cart[0].order_quantity == 4

    @pytest.mark.parametrize("bad_quantity", [0, -2, 0.5, float("nan")])
    def test_set_quantity_below_one_is_rejected(self, ledger, bad_quantity):
        ledger.add_to_cart("a")
        ledger.set_cart_quantity("a", 3)
        ledger.set_cart_quantity("a", bad_quantity)
        assert ledger.cart[0].order_quantity == 3

    def test_set_quantity_for_missing_line_is_ignored(self, ledger):
        ledger.set_cart_quantity("a", 5)
        assert ledger.cart == []

    def test_clear(self, ledger):
        ledger.add_to_cart("a")
        ledger.clear_cart()
        assert ledger.cart == []

    def test_summary_in_insertion_order(self, ledger):
        ledger.add_to_cart("c")
        ledger.add_to_cart("a")
        ledger.set_cart_quantity("a", 2)
        assert ledger.order_summary() == [
            OrderLine("C", 1, UnitOfMeasure.UNITS),
            OrderLine("A", 2, UnitOfMeasure.BOTTLES),
        ]

    def test_summary_skips_deleted_products(self, ledger, always_confirm):
        """A product deleted after being added silently drops out of the summary."""
        ledger.add_to_cart("a")
        ledger.add_to_cart("b")
        ledger.delete_product("a", always_confirm)
        assert ledger.order_summary() == [OrderLine("B", 1, UnitOfMeasure.CASES)]
        assert len(ledger.cart) == 2


class TestCatalogEditing:
    """Product and supplier forms with delete confirmation."""

    def test_create_product(self, ledger):
        product = ledger.save_product(
            {"name": "Aperol", "quantity": 1, "maxCapacity": 6, "unit": "botellas", "minStockAlert": 2}
        )
        assert product is not None
        assert product.unit == UnitOfMeasure.BOTTLES
        assert ledger.get_product(product.id) == product
        assert ledger.products[-1].name == "Aperol"

    def test_create_product_needs_a_name(self, ledger):
        assert ledger.save_product({"name": "", "max_capacity": 5}) is None
        assert len(ledger.products) == 3

    def test_invalid_capacity_is_rejected(self, ledger):
        assert ledger.save_product({"name": "Ron", "max_capacity": 0}) is None

    def test_edit_product_keeps_id_and_position(self, ledger):
        edited = ledger.save_product({"quantity": 7, "min_stock_alert": 2}, product_id="b")
        assert edited.id == "b"
        assert edited.name == "B"
        assert [p.id for p in ledger.products] == ["a", "b", "c"]
        assert ledger.get_product("b").quantity == 7

    def test_edit_unknown_product(self, ledger):
        assert ledger.save_product({"name": "X"}, product_id="nope") is None

    def test_delete_requires_confirmation(self, ledger):
        prompts = []

        def decline(prompt):
            prompts.append(prompt)
            return False

        assert ledger.delete_product("a", decline) is False
        assert ledger.get_product("a") is not None
        assert prompts == ["¿Estás seguro de eliminar esta bebida del inventario?"]

    def test_delete_confirmed(self, ledger, always_confirm):
        assert ledger.delete_product("a", always_confirm) is True
        assert ledger.get_product("a") is None

    def test_supplier_needs_name_and_phone(self, ledger):
        assert ledger.save_supplier({"name": "Sin Teléfono", "phone": ""}) is None
        assert ledger.save_supplier({"name": "", "phone": "1"}) is None
        assert len(ledger.suppliers) == 2

    def test_create_supplier_defaults_to_all_products(self, ledger):
        supplier = ledger.save_supplier({"name": "Nuevo", "phone": "555"})
        assert supplier.product_ids == []
        ledger.select_supplier(supplier.id)
        assert len(ledger.available_products()) == 3

    def test_toggle_supplier_product(self, ledger):
        ledger.toggle_supplier_product("acme", "b")
        assert ledger.get_supplier("acme").product_ids == ["b"]
        ledger.toggle_supplier_product("acme", "b")
        assert ledger.get_supplier("acme").product_ids == []

    def test_deleting_selected_supplier_resets_order(self, ledger, always_confirm):
        ledger.select_supplier("acme")
        ledger.add_to_cart("a")
        assert ledger.delete_supplier("acme", always_confirm) is True
        assert ledger.selected_supplier_id is None
        assert ledger.cart == []

    def test_status_counts(self, ledger):
        assert ledger.status_counts() == {
            StockStatus.CRITICAL: 1,
            StockStatus.LOW: 1,
            StockStatus.OK: 1,
        }


class TestDefaults:
    """Starting catalog."""

    def test_default_catalog_loads(self):
        ledger = Ledger.with_defaults()
        assert len(ledger.products) == 92
        assert {s.name for s in ledger.suppliers} == {"Distribuidora General", "Licores Premium"}
        assert ledger.get_product("z2").quantity == 0.5

    def test_default_ids_are_unique(self):
        ids = [p.id for p in Ledger.with_defaults().products]
        assert len(ids) == len(set(ids))
