# -*- coding: utf-8 -*-
from decimal import Decimal

DEFAULT_CATEGORIES = [
    ("Electronics", "Electronic components and devices"),
    ("Hardware", "Hardware materials and tools"),
    ("Office Supplies", "Office and stationery items"),
    ("Raw Materials", "Raw materials for production"),
    ("Safety Equipment", "Safety gear and equipment"),
]

# (name, description, sku, category name, quantity, minimum quantity, unit price)
DEFAULT_MATERIALS = [
    ("Arduino Uno", "Microcontroller board based on ATmega328P", "ELEC-ARD-001",
     "Electronics", 50, 10, Decimal("25.99")),
    ("Screwdriver Set", "Professional 12-piece screwdriver set", "HARD-SCR-001",
     "Hardware", 5, 8, Decimal("29.99")),
    ("A4 Paper Ream", "500 sheets of white A4 paper", "OFF-PAP-001",
     "Office Supplies", 100, 20, Decimal("4.99")),
]
