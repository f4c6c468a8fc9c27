"""Parsing of item arguments given on the command line.

An item is written as::

    NAME[:QTY][;size=SIZE][;crust=CRUST][;toppings=T1,T2]

for example ``"Pizza Pepperoni:2;size=Mediana (25cm);toppings=Jamón,Piña"``.
"""

from __future__ import annotations

import click

from pizzeria.application.dto import CartItemSpec

_KEYS = ("size", "crust", "toppings")


def parse_item(raw: str) -> CartItemSpec:
    head, *options = [part.strip() for part in raw.split(";")]
    if not head:
        raise click.BadParameter(f"Invalid item '{raw}': product name is missing.")

    name, quantity = head, 1
    if ":" in head:
        name, qty_str = head.rsplit(":", 1)
        try:
            quantity = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{name}'."
            )

    fields: dict[str, str] = {}
    for option in options:
        if not option:
            continue
        key, sep, value = option.partition("=")
        key = key.strip().lower()
        if not sep or key not in _KEYS:
            raise click.BadParameter(
                f"Invalid option '{option}'. Expected one of: "
                + ", ".join(f"{k}=..." for k in _KEYS)
            )
        fields[key] = value.strip()

    toppings = tuple(
        t.strip() for t in fields.get("toppings", "").split(",") if t.strip()
    )
    return CartItemSpec(
        product_name=name.strip(),
        quantity=quantity,
        size=fields.get("size") or None,
        crust=fields.get("crust") or None,
        toppings=toppings,
    )
