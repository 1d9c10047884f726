"""
Command‑line interface for the online store.

This module wires the ``StoreApp`` class into an interactive menu loop.
It prompts the user for input, invokes methods on the ``StoreApp``
instance and prints results.  Keeping the prompts here leaves the
business logic testable and free from console I/O.
"""

import logging
import sys
from typing import List, Optional

from online_store import logging_config
from online_store.app import StoreApp
from online_store.errors import InvalidMenuChoice, NonNumericInput, StoreError
from online_store.metrics import generate_metrics_text
from online_store.orders import Order

logger = logging.getLogger(__name__)

MENU_CHOICES = ("1", "2", "3", "4")


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _parse_number(app: StoreApp, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        exc = NonNumericInput(raw)
        app.record_input_error(exc)
        raise exc from None


def _is_yes(answer: str) -> bool:
    return answer.lower() in ("y", "yes")


def print_menu() -> None:
    print("\n===== MENU =====")
    print("1. View Products")
    print("2. View Shopping Cart")
    print("3. View Orders")
    print("4. Exit")


def view_products(app: StoreApp) -> None:
    """List the catalog, then let the user add products until they answer N."""
    print("\nProduct ID\tName\t\tPrice")
    for p in app.list_products():
        print(f"{p.id}\t\t{p.name}\t\t{p.price:.2f}")

    while True:
        product_id = _ask("\nEnter the Product ID to add to cart: ")
        try:
            product = app.find_product(product_id)
            qty = _parse_number(app, _ask("Enter quantity: "))
            app.add_to_cart(product.id, qty)
            print("Product added successfully!")
        except NonNumericInput as exc:
            print(exc)
        except StoreError as exc:
            print(f"Error: {exc}")

        if not _is_yes(_ask("Add another product? (Y/N): ")):
            break


def view_cart(app: StoreApp) -> None:
    """Show the cart and optionally pay for everything in it."""
    entries = app.view_cart()
    if not entries:
        print("\nShopping cart is empty!")
        return

    print("\nProduct ID\tName\t\tPrice\tQuantity")
    for entry in entries:
        print(f"{entry.product.id}\t\t{entry.product.name}\t\t{entry.product.price:.2f}\t{entry.quantity}")
    print(f"Total: {app.cart_total():.2f}")

    if not _is_yes(_ask("\nDo you want to checkout all products? (Y/N): ")):
        return

    if not app.begin_checkout():
        return
    print("\nSelect Payment Method:")
    for choice, label in app.payment_service.menu():
        print(f"{choice}. {label}")
    raw_choice = _ask("Choice: ")
    try:
        _parse_number(app, raw_choice)
    except NonNumericInput as exc:
        # Still cancelled below as an invalid payment choice
        print(exc)
    result = app.checkout(raw_choice)
    if result.ok:
        print(result.confirmation)
        print(f"\n{result.message}")
    else:
        print(result.message)


def format_order(order: Order) -> List[str]:
    lines = [
        f"Order ID: {order.order_id}",
        f"Total Amount: {order.total_amount:.2f}",
        f"Payment Method: {order.payment_method}",
        "Order Details:",
        "Product ID\tName\tPrice\tQuantity",
    ]
    for item in order.line_items:
        lines.append(f"{item.product.id}\t\t{item.product.name}\t{item.product.price:.2f}\t{item.quantity}")
    return lines


def view_orders(app: StoreApp) -> None:
    orders = app.list_orders()
    if not orders:
        print("\nNo orders available!")
        return
    for order in orders:
        print("\n".join(format_order(order)))
        print()


def interactive_cli(app: Optional[StoreApp] = None) -> None:
    """Run the main menu until the user exits or input ends."""
    app = app if app is not None else StoreApp()
    actions = {"1": view_products, "2": view_cart, "3": view_orders}

    while True:
        print_menu()
        try:
            choice = _ask("Enter choice: ")
            if choice not in MENU_CHOICES:
                raise InvalidMenuChoice(choice)
            if choice == "4":
                print("Exiting program...")
                break
            actions[choice](app)
        except InvalidMenuChoice as exc:
            app.record_input_error(exc)
            print(exc)
        except EOFError:
            print("\nExiting program...")
            break


def main() -> int:
    logging_config.configure_logging()
    logger.info("Session started")
    try:
        interactive_cli()
    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting.")
    logger.info("Session finished", extra={"extra": {"metrics": generate_metrics_text()}})
    return 0


if __name__ == "__main__":
    sys.exit(main())
