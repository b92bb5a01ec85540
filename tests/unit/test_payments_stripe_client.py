import pytest
import stripe

from bistro.errors import GatewayError, ValidationError
from bistro.payments import stripe_client

@pytest.mark.parametrize("price,expected", [
    (10.5, 1050),
    ("10.5", 1050),
    (0.29, 29),
    (19.999, 1999),
    (1, 100),
    (0.01, 1),
])
def test_to_minor_units_truncates(price, expected):
    assert stripe_client.to_minor_units(price) == expected

@pytest.mark.parametrize("price", [0, -5, "0", "abc", None, True, float("nan"), float("inf"), 0.001])
def test_to_minor_units_rejects_invalid(price):
    with pytest.raises(ValidationError):
        stripe_client.to_minor_units(price)

def test_create_payment_intent_card_only(monkeypatch):
    captured = {}
    def fake_create(**kwargs):
        captured.update(kwargs)
        return {"id": "pi_123", "client_secret": "pi_123_secret_abc"}
    monkeypatch.setattr(stripe.PaymentIntent, "create", fake_create)

    intent = stripe_client.create_payment_intent(amount=1050, currency="inr")

    assert intent["client_secret"] == "pi_123_secret_abc"
    assert captured == {"amount": 1050, "currency": "inr", "payment_method_types": ["card"]}

def test_create_payment_intent_wraps_stripe_errors(monkeypatch):
    def boom(**kwargs):
        raise stripe.APIConnectionError("network down")
    monkeypatch.setattr(stripe.PaymentIntent, "create", boom)

    with pytest.raises(GatewayError):
        stripe_client.create_payment_intent(amount=1050, currency="inr")
