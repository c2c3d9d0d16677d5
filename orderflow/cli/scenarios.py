"""Runnable scenarios, one per CLI resource.

Each scenario builds its collaborators through the Application, prints the
console lines its collaborators produce and returns a structured result.
"""
from __future__ import annotations

import argparse
from typing import Any, Callable, Dict

from orderflow.bootstrap import Application
from orderflow.config import AppConfig, ConfigurationManager
from orderflow.domain.account import (
    BasicAccount,
    OverdraftBankAccount,
    SavingsAccount,
    StandardBankAccount,
)
from orderflow.domain.core.exceptions import AccessDeniedError, DomainException
from orderflow.domain.order.order_aggregate import Order
from orderflow.domain.order.value_objects import OrderItem
from orderflow.domain.pricing import (
    BasicOrder,
    DiscountDecorator,
    DiscountedOrder,
    FixedDiscount,
    PercentageDiscount,
    TaxDecorator,
)
from orderflow.application.payment import Boleto, CreditCard, Pix
from orderflow.infrastructure.storage import CloudFileSaver, LocalFileSaver


def run_facade(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    order = Order(args.order_id, args.amount)
    facade = app.create_order_facade()
    result = facade.process_order(order)
    print(f"Order processed: {result.to_dict()}")
    return {"order": order.to_dict(), "result": result.to_dict()}


def run_proxy(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    order = Order(args.order_id, args.amount)
    roles = args.roles or app.config.proxy.roles
    outcomes = []
    for role in roles:
        proxy = app.create_payment_proxy(role)
        role_name = proxy.user_role.value
        try:
            result = proxy.process_payment(order.amount, order.id)
            # Second identical call is served from the proxy cache
            proxy.process_payment(order.amount, order.id)
            outcomes.append({"role": role_name, "result": result.to_dict()})
        except AccessDeniedError as e:
            print(e.message)
            outcomes.append({"role": role_name, "error": e.message})
    order.complete()
    print(f"Order {order.id} completed with status: {order.status.value}")
    return {"order": order.to_dict(), "payments": outcomes}


def run_observer(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    order = Order(args.order_id, args.amount)
    subject = app.create_order_subject(order)
    print(f"Initial status: {order.status.value}")
    history = []
    for index, status in enumerate(args.statuses):
        if index == 1 and len(subject.observers) > 1:
            # Drop the last observer after the first notification round
            subject.remove_observer(subject.observers[-1])
        subject.set_status(status)
        history.append({
            "status": order.status.value,
            "observers": [type(observer).__name__ for observer in subject.observers],
        })
    return {"order": order.to_dict(), "notifications": history}


def run_decorator(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    pricing = app.config.pricing
    discount = args.discount if args.discount is not None else pricing.discount_percentage
    tax = args.tax if args.tax is not None else pricing.tax_rate

    basic = BasicOrder(args.item, args.price)
    discounted = DiscountDecorator(basic, discount)
    taxed = TaxDecorator(discounted, tax)
    steps = []
    for label, component in (("basic", basic), ("discount", discounted), ("tax", taxed)):
        print(f"{label}: {component.get_description()} - R$ {component.get_price():.2f}")
        steps.append({
            "step": label,
            "description": component.get_description(),
            "price": round(component.get_price(), 2),
        })
    return {"steps": steps}


def run_template(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    order = Order(args.order_id, args.amount)
    payment = app.create_payment_template(args.method)
    result = payment.process_payment(order)
    return {"order": order.to_dict(), "result": result.to_dict()}


def run_adapter(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    order = Order(args.order_id, customer_id=args.customer_id)
    order.add_item(OrderItem("item1", "prod123", 50.0, 2))
    order.add_item(OrderItem("item2", "prod456", 25.0, 1))
    checkout = app.create_checkout(args.gateway)
    result = checkout.process(order)
    return {"gateway": args.gateway, "order": order.to_dict(), "result": result.to_dict()}


def run_methods(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    credit_card, boleto, pix = CreditCard(), Boleto(), Pix()
    documents = {}

    credit_card.pay(args.amount, args.description)
    documents["credit_card"] = credit_card.generate_document(args.amount, args.description)

    boleto.pay(args.amount, args.description)
    documents["boleto"] = boleto.generate_document(args.amount, args.description)

    pix.pay(args.amount, args.description)
    documents["pix"] = pix.generate_qr_code(args.amount, args.description)

    for document in documents.values():
        print(document)
    return {"amount": args.amount, "documents": sorted(documents)}


def _attempt(operation: Callable[[], None]) -> str:
    try:
        operation()
        return "ok"
    except DomainException as e:
        return e.message


def run_accounts(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    standard = StandardBankAccount()
    standard.deposit(args.deposit)
    overdraft = OverdraftBankAccount()
    overdraft.deposit(args.deposit)
    basic = BasicAccount()
    savings = SavingsAccount()

    results = {
        "standard_withdraw": _attempt(lambda: standard.withdraw(args.withdraw)),
        "overdraft_withdraw": _attempt(lambda: overdraft.withdraw(args.withdraw)),
        "basic_small_deposit": _attempt(lambda: basic.deposit(5)),
        "savings_small_deposit": _attempt(lambda: savings.deposit(5)),
    }
    balances = {
        "standard": standard.get_balance(),
        "overdraft": overdraft.get_balance(),
        "basic": basic.get_balance(),
        "savings": savings.get_balance(),
    }
    local_path = LocalFileSaver().save_file_local("orderflow report")
    cloud_url = CloudFileSaver().save_file_cloud("orderflow report")
    for name, outcome in results.items():
        print(f"{name}: {outcome}")
    return {"operations": results, "balances": balances,
            "files": {"local": local_path, "cloud": cloud_url}}


def run_discounts(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    pricing = app.config.pricing
    order = DiscountedOrder(args.amount)
    amounts = {"none": order.get_amount()}
    order.set_discount(FixedDiscount(pricing.fixed_discount))
    amounts["fixed"] = order.get_amount()
    order.set_discount(PercentageDiscount(pricing.discount_percentage))
    amounts["percentage"] = order.get_amount()
    for name, amount in amounts.items():
        print(f"{name}: R$ {amount:.2f}")
    return {"base_amount": args.amount, "amounts": amounts}


def run_processor(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    order = Order.open(args.order_id, args.amount)
    processor = app.create_order_processor(in_stock=not args.out_of_stock,
                                           approve_payment=not args.decline)
    total = processor.process_order(order)
    print(f"Order {order.id} closed with total {total:.2f}")
    return {"order": order.to_dict(), "total": total}


def run_config(app: Application, args: argparse.Namespace) -> Dict[str, Any]:
    manager = app.config_manager
    before = manager.get_config().model_dump()
    if args.api_key is not None or args.timeout is not None:
        manager.set_config(
            args.api_key if args.api_key is not None else before["api_key"],
            args.timeout if args.timeout is not None else before["timeout"],
        )
    after = manager.get_config().model_dump()
    # A separately built manager keeps its own settings
    independent = ConfigurationManager(AppConfig())
    return {"before": before, "after": after, "independent": independent.get_config().model_dump()}


SCENARIOS: Dict[str, Callable[[Application, argparse.Namespace], Dict[str, Any]]] = {
    "facade": run_facade,
    "proxy": run_proxy,
    "observer": run_observer,
    "decorator": run_decorator,
    "template": run_template,
    "adapter": run_adapter,
    "methods": run_methods,
    "accounts": run_accounts,
    "discounts": run_discounts,
    "processor": run_processor,
    "config": run_config,
}
