import importlib

import pytest


@pytest.mark.parametrize(
    "module_name",
    [
        "app.main",
        "app.quantum.repos.categories",
        "app.quantum.repos.orders",
        "app.quantum.repos.products",
        "app.quantum.repos.reviews",
        "app.quantum.repos.users",
        "quantum_console.clients.quantum_sdk.modules.categories_client",
        "quantum_console.clients.quantum_sdk.modules.orders_client",
        "quantum_console.clients.quantum_sdk.modules.products_client",
        "quantum_console.clients.quantum_sdk.modules.reviews_client",
        "quantum_console.clients.quantum_sdk.modules.users_client",
        "quantum_console.app.pages.listing_page",
        "quantum_console.app.main",
    ],
)
def test_module_imports(module_name):
    module = importlib.import_module(module_name)

    assert module.__name__ == module_name


def test_app_main_exposes_application():
    module = importlib.import_module("app.main")

    assert module.app.title
