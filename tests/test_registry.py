from __future__ import annotations

import pytest

from pyidioms.core import balance as balance_mod
from pyidioms.core.balance import (
    BalanceHolder,
    BankAccount,
    create_holder,
    holder_class,
    holder_kinds,
    register_holder,
)
from pyidioms.core.errors import RegistryError, UnknownKind


def test_builtin_kinds_registered():
    assert {"balance", "bank_account"}.issubset(holder_kinds())
    assert holder_class("balance") is BalanceHolder
    assert holder_class("bank_account") is BankAccount


def test_create_holder_dispatches_on_kind(metrics_registry):
    h = create_holder("bank_account", value=10, owner="eve")
    assert isinstance(h, BankAccount)
    assert h.kind == "bank_account"
    assert h.read() == 10


def test_unknown_kind():
    with pytest.raises(UnknownKind, match="nope"):
        holder_class("nope")
    with pytest.raises(KeyError):
        create_holder("nope")


def test_register_custom_variant(monkeypatch, metrics_registry):
    monkeypatch.setattr(balance_mod, "_HOLDERS", dict(balance_mod._HOLDERS))

    @register_holder("wallet")
    class Wallet(BalanceHolder):
        pass

    assert Wallet.kind == "wallet"
    assert type(create_holder("wallet", value=2)) is Wallet
    # subclasses keep their own kind tag
    assert BalanceHolder.kind == "balance"


def test_duplicate_kind_rejected(monkeypatch):
    monkeypatch.setattr(balance_mod, "_HOLDERS", dict(balance_mod._HOLDERS))

    with pytest.raises(RegistryError):

        @register_holder("balance")
        class Other(BalanceHolder):
            pass


def test_unregistered_subclass_cannot_describe_itself(metrics_registry):
    class Shadow(BalanceHolder):
        pass

    with pytest.raises(RegistryError, match="Shadow"):
        Shadow(1).to_dict()
    assert Shadow(1) == Shadow(1)
