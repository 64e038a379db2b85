from .schemas import Product, Supplier, UnitOfMeasure

# Starting bar catalog: (id, name, quantity, max capacity, unit, min stock alert)
DEFAULT_PRODUCT_ROWS = [
    # Cervezas y Refrescos (Parte 1)
    ("c1", "Pepsi", 5, 24, UnitOfMeasure.UNITS, 6),
    ("c2", "7up", 2, 24, UnitOfMeasure.UNITS, 6),
    ("c3", "Tónica", 3, 24, UnitOfMeasure.UNITS, 6),
    ("c4", "Cerveza Heineken", 26, 48, UnitOfMeasure.BOTTLES, 12),
    ("c5", "Cerveza Corona", 0, 48, UnitOfMeasure.BOTTLES, 12),
    # Aperitivos
    ("ap1", "Chuches", 0, 10, UnitOfMeasure.UNITS, 2),
    ("ap2", "Frutos Secos", 2, 5, UnitOfMeasure.CASES, 1),
    ("ap3", "Patatas Varias", 0, 10, UnitOfMeasure.UNITS, 2),
    # RON
    ("r1", "Ron Barceló", 8, 12, UnitOfMeasure.BOTTLES, 3),
    ("r2", "Havana Club 7", 3, 6, UnitOfMeasure.BOTTLES, 2),
    ("r3", "Ron Brugal", 4, 6, UnitOfMeasure.BOTTLES, 2),
    ("r4", "Overproof", 3, 4, UnitOfMeasure.BOTTLES, 1),
    ("r5", "Ron Cacique", 2, 6, UnitOfMeasure.BOTTLES, 2),
    ("r6", "Santa Teresa", 10, 12, UnitOfMeasure.BOTTLES, 3),
    ("r7", "Ron Legendario", 2, 6, UnitOfMeasure.BOTTLES, 2),
    ("r8", "Diplomático Reserva", 2, 6, UnitOfMeasure.BOTTLES, 2),
    ("r9", "Havana Club 3", 2, 6, UnitOfMeasure.BOTTLES, 2),
    ("r10", "Bacardí", 3, 6, UnitOfMeasure.BOTTLES, 2),
    ("r11", "Apache", 6, 8, UnitOfMeasure.BOTTLES, 2),
    # GINEBRA
    ("g1", "Beefeater", 5, 10, UnitOfMeasure.BOTTLES, 3),
    ("g2", "Puerto de Indias", 5, 10, UnitOfMeasure.BOTTLES, 3),
    ("g3", "Puerto de Indias 0,0", 2, 4, UnitOfMeasure.BOTTLES, 1),
    ("g4", "Tanqueray", 8, 12, UnitOfMeasure.BOTTLES, 3),
    ("g5", "Tanqueray 0,0", 3, 5, UnitOfMeasure.BOTTLES, 1),
    ("g6", "Bombay Sapphire", 5, 10, UnitOfMeasure.BOTTLES, 3),
    ("g7", "Seagram's", 4, 8, UnitOfMeasure.BOTTLES, 2),
    ("g8", "Hendrick's", 3, 6, UnitOfMeasure.BOTTLES, 1),
    ("g9", "Martin Miller's", 4, 6, UnitOfMeasure.BOTTLES, 2),
    ("g10", "G'Vine", 4, 6, UnitOfMeasure.BOTTLES, 2),
    # VODKA
    ("v1", "Moskovskaya", 6, 10, UnitOfMeasure.BOTTLES, 2),
    ("v2", "Grey Goose", 5, 8, UnitOfMeasure.BOTTLES, 2),
    ("v3", "Cîroc", 2, 5, UnitOfMeasure.BOTTLES, 1),
    ("v4", "Smirnoff", 1, 5, UnitOfMeasure.BOTTLES, 2),
    # WHISKY
    ("w1", "Johnnie Walker Black Label", 13, 18, UnitOfMeasure.BOTTLES, 4),
    ("w2", "Johnnie Walker Red Label", 14, 18, UnitOfMeasure.BOTTLES, 4),
    ("w3", "Ballantine's", 3, 8, UnitOfMeasure.BOTTLES, 2),
    ("w4", "Jack Daniel's", 4, 10, UnitOfMeasure.BOTTLES, 3),
    ("w5", "Bourbon", 3, 6, UnitOfMeasure.BOTTLES, 1),
    ("w6", "Jameson", 4, 8, UnitOfMeasure.BOTTLES, 2),
    ("w7", "Lagavulin", 1, 3, UnitOfMeasure.BOTTLES, 1),
    ("w8", "Buchanan's", 2, 5, UnitOfMeasure.BOTTLES, 1),
    ("w9", "Old Parr", 1, 3, UnitOfMeasure.BOTTLES, 1),
    ("w10", "J&B", 4, 8, UnitOfMeasure.BOTTLES, 2),
    # TEQUILA
    ("t1", "Penca", 6, 10, UnitOfMeasure.BOTTLES, 2),
    ("t2", "Penca Alma", 2, 5, UnitOfMeasure.BOTTLES, 1),
    ("t3", "José Cuervo Reposado", 3, 6, UnitOfMeasure.BOTTLES, 2),
    ("t4", "José Cuervo Silver", 5, 8, UnitOfMeasure.BOTTLES, 2),
    ("t5", "Don Julio Silver", 3, 5, UnitOfMeasure.BOTTLES, 1),
    ("t6", "Don Julio Reposado", 0, 5, UnitOfMeasure.BOTTLES, 2),
    ("t7", "1800 Reposado", 2, 5, UnitOfMeasure.BOTTLES, 1),
    ("t8", "1800 Silver", 1, 5, UnitOfMeasure.BOTTLES, 1),
    ("t9", "Tequila Fresa", 4, 8, UnitOfMeasure.BOTTLES, 2),
    ("t10", "Tequila Mango", 4, 8, UnitOfMeasure.BOTTLES, 2),
    ("t11", "Aguardiente Amarillo", 1, 3, UnitOfMeasure.BOTTLES, 1),
    ("t12", "Aguardiente", 0, 3, UnitOfMeasure.BOTTLES, 1),
    # LICORES
    ("l1", "Fireball", 2, 5, UnitOfMeasure.BOTTLES, 1),
    ("l2", "Jack Daniel's Canela", 2, 5, UnitOfMeasure.BOTTLES, 1),
    ("l3", "Jägermeister", 6, 10, UnitOfMeasure.BOTTLES, 3),
    ("l4", "Campari", 2, 5, UnitOfMeasure.BOTTLES, 1),
    ("l5", "Aperol", 1, 6, UnitOfMeasure.BOTTLES, 2),
    ("l6", "Licor Mora", 1, 3, UnitOfMeasure.BOTTLES, 1),
    ("l7", "Martini Blanco", 1, 4, UnitOfMeasure.BOTTLES, 1),
    ("l8", "Pisco", 3, 5, UnitOfMeasure.BOTTLES, 1),
    ("l9", "Baileys", 0, 5, UnitOfMeasure.BOTTLES, 2),
    ("l10", "Licor de Hierbas", 1, 4, UnitOfMeasure.BOTTLES, 1),
    ("l11", "Malibú", 3, 6, UnitOfMeasure.BOTTLES, 1),
    ("l12", "Bols Triple Sec", 2, 4, UnitOfMeasure.BOTTLES, 1),
    ("l13", "Bols Banana", 1, 3, UnitOfMeasure.BOTTLES, 1),
    ("l14", "Bols Blue Curacao", 1, 3, UnitOfMeasure.BOTTLES, 1),
    # PURÉS
    ("p1", "Puré Mango", 5, 8, UnitOfMeasure.BOTTLES, 2),
    ("p2", "Puré Fresa", 2, 6, UnitOfMeasure.BOTTLES, 2),
    ("p3", "Puré Fruta Pasión", 4, 8, UnitOfMeasure.BOTTLES, 2),
    ("p4", "Puré Banana", 4, 8, UnitOfMeasure.BOTTLES, 2),
    ("p5", "Puré Frambuesa", 0, 4, UnitOfMeasure.BOTTLES, 1),
    ("p6", "Puré Coco", 2, 5, UnitOfMeasure.BOTTLES, 1),
    # SIROPES
    ("s1", "Sirope Coco", 9, 12, UnitOfMeasure.BOTTLES, 3),
    ("s2", "Sirope Miel", 2, 5, UnitOfMeasure.BOTTLES, 1),
    ("s3", "Sirope Granadina", 5, 8, UnitOfMeasure.BOTTLES, 2),
    ("s4", "Sirope Manzana Verde", 4, 6, UnitOfMeasure.BOTTLES, 2),
    ("s5", "Sirope Cactus", 2, 4, UnitOfMeasure.BOTTLES, 1),
    ("s6", "Sirope Canela", 1, 4, UnitOfMeasure.BOTTLES, 1),
    ("s7", "Sirope Vainilla", 2, 5, UnitOfMeasure.BOTTLES, 1),
    ("s8", "Sirope Jazmín", 1, 3, UnitOfMeasure.BOTTLES, 1),
    ("s9", "Sirope Palomitas", 1, 3, UnitOfMeasure.BOTTLES, 1),
    ("s10", "Licor Manzana (Sirope)", 1, 3, UnitOfMeasure.BOTTLES, 1),
    # REFRESCOS EXTRA & ZUMOS
    ("rx1", "Red Bull", 1, 10, UnitOfMeasure.CASES, 2),
    ("rx2", "Ginger Beer", 4, 8, UnitOfMeasure.CASES, 2),
    ("rx3", "Agua con Gas", 3, 10, UnitOfMeasure.CASES, 2),
    ("rx4", "Agua Normal", 2, 10, UnitOfMeasure.CASES, 2),
    ("z1", "Zumo Naranja", 3, 10, UnitOfMeasure.BOTTLES, 2),
    ("z2", "Zumo Piña", 0.5, 6, UnitOfMeasure.BOTTLES, 1),
    ("z3", "Zumo Melocotón", 2, 6, UnitOfMeasure.BOTTLES, 1),
]

DEFAULT_SUPPLIERS = [
    {
        "id": "1",
        "name": "Distribuidora General",
        "phone": "34600000000",
        "description": "Refrescos y Varios",
        "product_ids": [],
    },
    {
        "id": "2",
        "name": "Licores Premium",
        "phone": "34600000000",
        "description": "Alcohol y Espirituosas",
        "product_ids": [],
    },
]


def default_products() -> list[Product]:
    """Builds a fresh copy of the starting catalog."""
    return [
        Product(
            id=product_id,
            name=name,
            quantity=quantity,
            max_capacity=max_capacity,
            unit=unit,
            min_stock_alert=min_stock_alert,
        )
        for product_id, name, quantity, max_capacity, unit, min_stock_alert in DEFAULT_PRODUCT_ROWS
    ]


def default_suppliers() -> list[Supplier]:
    return [Supplier(**row) for row in DEFAULT_SUPPLIERS]
