from __future__ import annotations

import ast
import inspect

from petstore_client import api

PETSTORE_ROUTES = {
    ("addPet", "POST", "/pet"),
    ("updatePet", "PUT", "/pet"),
    ("findPetsByStatus", "GET", "/pet/findByStatus"),
    ("findPetsByTags", "GET", "/pet/findByTags"),
    ("getPetById", "GET", "/pet/{petId}"),
    ("updatePetWithForm", "POST", "/pet/{petId}"),
    ("deletePet", "DELETE", "/pet/{petId}"),
    ("uploadFile", "POST", "/pet/{petId}/uploadImage"),
    ("getInventory", "GET", "/store/inventory"),
    ("placeOrder", "POST", "/store/order"),
    ("getOrderById", "GET", "/store/order/{orderId}"),
    ("deleteOrder", "DELETE", "/store/order/{orderId}"),
    ("createUser", "POST", "/user"),
    ("createUsersWithListInput", "POST", "/user/createWithList"),
    ("loginUser", "GET", "/user/login"),
    ("logoutUser", "GET", "/user/logout"),
    ("getUserByName", "GET", "/user/{username}"),
    ("updateUser", "PUT", "/user/{username}"),
    ("deleteUser", "DELETE", "/user/{username}"),
}


def _client_routes() -> set[tuple[str, str, str]]:
    tree = ast.parse(inspect.getsource(api))
    routes: set[tuple[str, str, str]] = set()

    class Visitor(ast.NodeVisitor):
        def visit_Call(self, node: ast.Call) -> None:  # noqa: N802
            if isinstance(node.func, ast.Attribute) and node.func.attr == "_request" and len(node.args) >= 3:
                values = [arg.value for arg in node.args[:3] if isinstance(arg, ast.Constant)]
                if len(values) == 3 and all(isinstance(value, str) for value in values):
                    routes.add((values[0], values[1].upper(), values[2]))

            self.generic_visit(node)

    Visitor().visit(tree)
    return routes


def test_client_covers_every_petstore_operation() -> None:
    client_routes = _client_routes()

    assert sorted(PETSTORE_ROUTES - client_routes) == []
    assert sorted(client_routes - PETSTORE_ROUTES) == []


def test_every_operation_has_raw_twin() -> None:
    for api_class in (api.PetApi, api.StoreApi, api.UserApi):
        methods = {name for name, _ in inspect.getmembers(api_class, inspect.iscoroutinefunction)}
        public = {name for name in methods if not name.startswith("_")}
        for name in public:
            twin = name[: -len("_raw")] if name.endswith("_raw") else f"{name}_raw"
            assert twin in public, f"{api_class.__name__}.{name} has no counterpart {twin}"
