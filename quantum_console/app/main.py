from __future__ import annotations

import argparse
import getpass
import sys

from quantum_console.app.chat.chat_panel import ChatPanel, render_message
from quantum_console.app.config import AppConfig
from quantum_console.app.infrastructure.errors.error_mapper import ErrorMapper
from quantum_console.app.pages.listing_page import ListingPage, ToastCenter
from quantum_console.app.pages.resources import (
    RESOURCES,
    CategoriesSource,
    OrdersSource,
    ProductsSource,
    ResourceSource,
    ReviewsSource,
    UsersSource,
)
from quantum_console.app.ui.table_printer import print_table
from quantum_console.clients.quantum_sdk.auth_store import AuthStore
from quantum_console.clients.quantum_sdk.http_client import APIError, HttpClient
from quantum_console.clients.quantum_sdk.modules.auth_client import AuthClient
from quantum_console.clients.quantum_sdk.modules.categories_client import CategoriesClient
from quantum_console.clients.quantum_sdk.modules.chatbot_client import ChatbotClient
from quantum_console.clients.quantum_sdk.modules.orders_client import OrdersClient
from quantum_console.clients.quantum_sdk.modules.products_client import ProductsClient
from quantum_console.clients.quantum_sdk.modules.reviews_client import ReviewsClient
from quantum_console.clients.quantum_sdk.modules.users_client import UsersClient


def build_http_client(config: AppConfig, auth_store: AuthStore) -> HttpClient:
    return HttpClient(
        base_url=config.base_url,
        timeout_seconds=config.timeout_seconds,
        verify_ssl=config.verify_ssl,
        retry_max_attempts=config.retry_max_attempts,
        retry_backoff_ms=config.retry_backoff_ms,
        auth_store=auth_store,
    )


def build_source(resource: str, http: HttpClient, auth_store: AuthStore) -> ResourceSource:
    if resource == "products":
        return ProductsSource(ProductsClient(http, auth_store))
    if resource == "categories":
        return CategoriesSource(CategoriesClient(http, auth_store))
    if resource == "users":
        return UsersSource(UsersClient(http, auth_store))
    if resource == "orders":
        return OrdersSource(OrdersClient(http, auth_store))
    return ReviewsSource(ReviewsClient(http, auth_store))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="quantum-console", description="Quantum admin console")
    parser.add_argument("--email", help="Account email (prompted when missing)")
    parser.add_argument("--password", help="Account password (prompted when missing)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("login", help="Check credentials and show the current account")

    list_parser = subparsers.add_parser("list", help="Print one page of a resource listing")
    list_parser.add_argument("resource", choices=sorted(RESOURCES))
    list_parser.add_argument("--page", type=int, default=1)
    list_parser.add_argument("--sort", help="Column id to sort by")
    list_parser.add_argument("--desc", action="store_true", help="Sort descending")
    list_parser.add_argument("--search", default="")
    list_parser.add_argument("--export", action="store_true", help="Export the filtered rows to CSV")

    ask_parser = subparsers.add_parser("ask", help="Ask the assistant a question")
    ask_parser.add_argument("question", nargs="+")
    ask_parser.add_argument("--export", action="store_true", help="Export table answers to CSV")
    return parser


def _login(args: argparse.Namespace, auth_client: AuthClient) -> dict:
    email = args.email or input("Email: ").strip()
    password = args.password or getpass.getpass("Password: ")
    return auth_client.login(email, password)


def _print_toasts(toasts: ToastCenter) -> None:
    for toast in toasts.drain():
        suffix = f" (trace_id={toast.trace_id})" if toast.trace_id else ""
        print(f"[{toast.level}] {toast.message}{suffix}")


def run_list(args: argparse.Namespace, config: AppConfig, http: HttpClient, auth_store: AuthStore) -> int:
    resource = RESOURCES[args.resource]
    page = ListingPage(
        resource,
        build_source(args.resource, http, auth_store),
        auth_store,
        items_per_page=config.items_per_page,
        export_dir=config.export_dir,
    )
    if args.sort:
        page.sort(args.sort)
        if args.desc:
            page.sort(args.sort)
    loaded = page.set_search(args.search) if args.search else page.load()
    if loaded and args.page != 1 and not page.go_to_page(args.page):
        page.toasts.warning(f"Page {args.page} is out of range (1-{page.table.total_pages}).")
    if loaded:
        print_table(page.table, title=resource.title)
        if args.export:
            page.export_rows()
    _print_toasts(page.toasts)
    if page.redirect_to_login:
        print("Session expired, run `login` again.")
    return 0 if loaded else 1


def run_ask(args: argparse.Namespace, config: AppConfig, http: HttpClient, auth_store: AuthStore) -> int:
    panel = ChatPanel(ChatbotClient(http, auth_store), export_dir=config.export_dir)
    replies = panel.ask(" ".join(args.question))
    for message in replies:
        print(render_message(message))
        if args.export and message.type == "table":
            print(f"Exported to {panel.export_table(message)}")
    return 1 if panel.last_error else 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        config = AppConfig.from_env()
    except ValueError as error:
        print(f"[config-error] {error}")
        return 2

    auth_store = AuthStore()
    http = build_http_client(config, auth_store)
    auth_client = AuthClient(http, auth_store)
    try:
        result = _login(args, auth_client)
    except APIError as error:
        print(ErrorMapper.to_display_message(error))
        return 1

    if args.command == "login":
        user = result.get("user") or {}
        print(f"Logged in as {user.get('email')} ({user.get('role')})")
        return 0
    if args.command == "list":
        return run_list(args, config, http, auth_store)
    return run_ask(args, config, http, auth_store)


if __name__ == "__main__":
    sys.exit(main())
