import pytest

from bidwallet.errors import (
    DomainError,
    ForbiddenAccessError,
    HoldFailedError,
    InvalidPaymentStatusError,
    ServiceError,
)
from bidwallet.validation import (
    AmountValidationLink,
    CorrelationValidationLink,
    IdentityValidationLink,
    PaymentStatusValidationLink,
    WalletCommandContext,
    WalletValidationChain,
)
from bidwallet.wallet import InvalidAmountError, Money


def test_wallet_validation_chain_rejects_zero_amount():
    context = WalletCommandContext(
        user_id="user-1", role="BUYER", amount=Money.zero()
    )
    with pytest.raises(ServiceError) as info:
        WalletValidationChain.wallet_mutation().validate(context)
    assert isinstance(info.value, DomainError)
    assert isinstance(info.value.error, InvalidAmountError)
    assert str(info.value) == "amount must be greater than zero"


def test_wallet_mutation_accepts_valid_context():
    context = WalletCommandContext(
        user_id="user-1", role="BUYER", amount=Money.from_rupiah(100)
    )
    chain = WalletValidationChain.wallet_mutation()
    assert chain.validate(context) is None
    assert len(chain.links) == 2


@pytest.mark.parametrize(
    ("user_id", "role"), [("", "BUYER"), ("  ", "BUYER"), ("user-1", ""), ("user-1", " \t")]
)
def test_identity_link_rejects_blank_identity(user_id, role):
    context = WalletCommandContext(user_id=user_id, role=role, amount=Money.from_rupiah(1))
    with pytest.raises(ForbiddenAccessError):
        WalletValidationChain.wallet_mutation().validate(context)


def test_identity_checked_before_amount():
    context = WalletCommandContext(user_id="", role="BUYER", amount=Money.zero())
    with pytest.raises(ForbiddenAccessError):
        WalletValidationChain.wallet_mutation().validate(context)


def test_amount_link_ignores_missing_amount():
    link = AmountValidationLink()
    assert link.validate(WalletCommandContext(user_id="u", role="r")) is None
    with pytest.raises(DomainError):
        link.validate(WalletCommandContext(user_id="u", role="r", amount=Money.zero()))


def test_hold_command_rejects_blank_correlation():
    context = WalletCommandContext(
        user_id="user-1", role="BUYER", amount=Money.from_rupiah(4000), correlation_id="  "
    )
    with pytest.raises(HoldFailedError) as info:
        WalletValidationChain.hold_command().validate(context)
    assert info.value.message == "correlation id is required"


def test_hold_command_accepts_missing_or_present_correlation():
    chain = WalletValidationChain.hold_command()
    base = dict(user_id="user-1", role="BUYER", amount=Money.from_rupiah(4000))
    assert chain.validate(WalletCommandContext(**base)) is None
    assert chain.validate(WalletCommandContext(**base, correlation_id="hold-1")) is None
    assert len(chain.links) == 3


def test_wallet_mutation_does_not_check_correlation():
    context = WalletCommandContext(
        user_id="user-1", role="BUYER", amount=Money.from_rupiah(1), correlation_id=""
    )
    assert WalletValidationChain.wallet_mutation().validate(context) is None
    with pytest.raises(HoldFailedError):
        CorrelationValidationLink().validate(context)


@pytest.mark.parametrize("status", ["PAID", "FAILED", "EXPIRED", "PENDING"])
def test_payment_status_chain_accepts_known_statuses(status):
    chain = WalletValidationChain.payment_status()
    assert chain.validate(WalletCommandContext(status=status)) is None
    assert len(chain.links) == 1


def test_payment_status_chain_rejects_missing_status():
    with pytest.raises(InvalidPaymentStatusError) as info:
        WalletValidationChain.payment_status().validate(WalletCommandContext())
    assert info.value.status == "missing status"


@pytest.mark.parametrize("status", ["paid", "SETTLEMENT", ""])
def test_payment_status_link_rejects_unknown_status(status):
    with pytest.raises(InvalidPaymentStatusError) as info:
        PaymentStatusValidationLink().validate(WalletCommandContext(status=status))
    assert info.value.status == status


def test_identity_link_alone():
    link = IdentityValidationLink()
    assert link.validate(WalletCommandContext(user_id="a", role="b")) is None
    with pytest.raises(ForbiddenAccessError):
        link.validate(WalletCommandContext())