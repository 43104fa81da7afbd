"""Tests for the factory and injector examples."""

import pytest

from architectural_patterns.factory import (
    PRODUCT_FACTORIES,
    ConcreteProduct,
    ProductKind,
    create_product,
)
from architectural_patterns.injector import Client, Injector, Service


class TestFactory:
    def test_every_kind_has_a_factory(self):
        assert set(PRODUCT_FACTORIES) == set(ProductKind)

    @pytest.mark.parametrize(
        "kind, expected",
        [
            (ProductKind.A, "Using ConcreteProductA"),
            (ProductKind.B, "Using ConcreteProductB"),
            ("a", "Using ConcreteProductA"),
            ("B", "Using ConcreteProductB"),
        ],
    )
    def test_create_and_use(self, kind, expected):
        product = create_product(kind)
        assert isinstance(product, ConcreteProduct)
        assert product.use() == expected

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            create_product("c")


class TestInjector:
    def test_provide_service(self):
        assert isinstance(Injector.provide_service(), Service)

    def test_provide_client_runs_service(self):
        client = Injector.provide_client()
        assert isinstance(client, Client)
        assert client.do_something() == "Performing action in Service"

    def test_no_caching(self):
        assert Injector.provide_client().service is not Injector.provide_client().service

    def test_provide_by_name(self):
        assert isinstance(Injector.provide("service"), Service)
        assert isinstance(Injector.provide("client"), Client)

    def test_provide_unknown_name(self):
        with pytest.raises(KeyError):
            Injector.provide("database")

    def test_client_uses_injected_service(self):
        class LoudService(Service):
            pass

        assert Client(LoudService()).do_something() == "Performing action in LoudService"
