import re

import pytest
from pydantic import ValidationError

from orderflow.domain.core.exceptions import InvalidArgumentError
from orderflow.domain.core.value_objects import Role
from orderflow.domain.payment.value_objects import (
    PaymentResult,
    PaymentStatus,
    TransactionId,
    format_amount,
)


def test_transaction_id_format():
    assert re.fullmatch(r"txn_\d{13}", TransactionId.generate())
    assert re.fullmatch(r"txn-\d{13}", TransactionId.generate(separator="-"))
    assert TransactionId.generate(prefix="ch").startswith("ch_")


def test_payment_result_variants():
    assert PaymentResult.success("t1").status == PaymentStatus.SUCCESS
    assert PaymentResult.completed("t1").status == PaymentStatus.COMPLETED

    failed = PaymentResult.failure("t1", "declined")
    assert failed.status == PaymentStatus.FAILED
    assert not failed.is_successful
    assert PaymentResult.success("t1").is_successful
    assert PaymentResult.completed("t1").is_successful


def test_payment_result_to_dict():
    assert PaymentResult.completed("txn_1").to_dict() == {
        "transactionId": "txn_1",
        "status": "completed",
    }
    assert PaymentResult.failure("txn_1", "declined").to_dict()["message"] == "declined"


def test_payment_result_is_immutable():
    result = PaymentResult.success("txn_1")

    with pytest.raises(ValidationError):
        result.transaction_id = "other"


def test_payment_result_requires_transaction_id():
    with pytest.raises(ValidationError):
        PaymentResult.success("")


@pytest.mark.parametrize("amount,expected", [(100, "100"), (100.0, "100"), (99.5, "99.5"), (0, "0")])
def test_format_amount(amount, expected):
    assert format_amount(amount) == expected


def test_every_role_has_a_payment_privilege():
    privileges = {role: role.can_process_payments for role in Role}

    assert privileges == {Role.ADMIN: True, Role.USER: False, Role.GUEST: False}


def test_role_from_value():
    assert Role.from_value("ADMIN") is Role.ADMIN
    assert Role.from_value(Role.GUEST) is Role.GUEST

    with pytest.raises(InvalidArgumentError):
        Role.from_value("superuser")
