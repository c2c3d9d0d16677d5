import pytest
from orderflow.application.payment.methods import Boleto, CreditCard, Pix
from orderflow.domain.core.exceptions import InvalidArgumentError
from orderflow.domain.payment.ports import DocumentGeneratorPort, PaymentMethodPort, QrCodeGeneratorPort


def test_capabilities_match_method():
    assert isinstance(CreditCard(), DocumentGeneratorPort)
    assert isinstance(Boleto(), DocumentGeneratorPort)
    assert isinstance(Pix(), QrCodeGeneratorPort)
    assert not isinstance(Pix(), DocumentGeneratorPort)
    assert not hasattr(CreditCard(), "generate_qr_code")
    assert all(isinstance(m, PaymentMethodPort) for m in (CreditCard(), Boleto(), Pix()))


def test_credit_card_pay_and_receipt(capsys):
    card = CreditCard()

    card.pay(150, "Order #1")
    receipt = card.generate_document(150, "Order #1")

    assert "R$ 150.00" in capsys.readouterr().out
    assert "Method: Credit Card" in receipt
    assert "Amount: R$ 150.00" in receipt


def test_boleto_document_has_due_date():
    document = Boleto().generate_document(99.9, "Order #2")

    assert "Amount: R$ 99.90" in document
    assert "Due date:" in document
    assert "Beneficiary:" in document


def test_pix_qr_code():
    qr_code = Pix().generate_qr_code(50, "Order #3")

    assert "br.gov.bcb.pix" in qr_code
    assert "Amount: R$ 50.00" in qr_code


@pytest.mark.parametrize("method", [CreditCard, Boleto, Pix])
def test_non_positive_amount_rejected(method):
    with pytest.raises(InvalidArgumentError):
        method().pay(0, "Order")
