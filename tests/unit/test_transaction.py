"""
Transactional scope argument contract and Runnable opt-in.
"""

import pytest

from gatecore import (
    ArgumentRequiredError,
    InvalidStateError,
    NullTransactionalScope,
    Runnable,
    TransactionalScope,
    TransactionOptions,
)


class RecordingScope(TransactionalScope):
    """Records every boundary it opens and how it ended"""

    def __init__(self):
        self.calls = []

    def _run_atomic(self, block, options):
        try:
            value = block()
        except BaseException as e:
            self.calls.append((options, "rollback", type(e).__name__))
            raise
        self.calls.append((options, "commit", None))
        return value


@pytest.fixture
def scope():
    return NullTransactionalScope()


class TestWithTransaction:

    def test_requires_a_block(self, scope):
        with pytest.raises(ArgumentRequiredError) as exc_info:
            scope.with_transaction()
        assert isinstance(exc_info.value, TypeError)
        assert exc_info.value.error_code == "ARGUMENT_REQUIRED"

    def test_options_without_block_is_an_error(self, scope):
        with pytest.raises(ArgumentRequiredError):
            scope.with_transaction(None)

    def test_calls_block_with_no_arguments(self, scope):
        received = []

        def block(*args, **kwargs):
            received.append((args, kwargs))
            return "value"

        assert scope.with_transaction(block) == "value"
        assert received == [((), {})]

    def test_accepts_an_options_argument(self, scope):
        assert scope.with_transaction(None, lambda: 1) == 1
        assert scope.with_transaction({"requires_new": True}, lambda: 2) == 2
        assert scope.with_transaction(TransactionOptions(label="x"), block=lambda: 3) == 3

    def test_rejects_extra_arguments(self, scope):
        with pytest.raises(TypeError):
            scope.with_transaction(None, None, lambda: 1)

    def test_rejects_unknown_options(self, scope):
        with pytest.raises(ValueError):
            scope.with_transaction({"isolation": "serializable"}, lambda: 1)

    def test_block_exception_propagates(self, scope):
        def block():
            raise RuntimeError("inside")

        with pytest.raises(RuntimeError, match="inside"):
            scope.with_transaction(block)


class Deposit(Runnable):
    transactional = True

    def __init__(self, amount, transaction_scope=None):
        super().__init__(transaction_scope=transaction_scope)
        self.amount = amount

    def execute(self):
        if self.amount > 1000:
            self.errors.add("amount", "exceeds the daily limit")
        return self.amount


Deposit.validate(lambda i: i.amount <= 0 and i.errors.add("amount", "must be positive"))


class TestTransactionalRunnable:

    def test_execute_runs_inside_scope(self):
        scope = RecordingScope()
        assert Deposit.run(10, transaction_scope=scope).result == 10

        options, outcome, _ = scope.calls[0]
        assert outcome == "commit"
        assert options.label == "Deposit"
        assert options.requires_new is False

    def test_invalid_never_opens_a_transaction(self):
        scope = RecordingScope()
        outcome = Deposit.run(-5, transaction_scope=scope)
        assert outcome.result is None
        assert scope.calls == []

    def test_errors_during_execute_roll_back(self):
        scope = RecordingScope()
        outcome = Deposit.run(5000, transaction_scope=scope)

        assert outcome.result is None
        assert outcome.errors["amount"] == ["exceeds the daily limit"]
        assert scope.calls[0][1:] == ("rollback", "Interrupt")

    def test_class_level_options(self):
        class NestedDeposit(Deposit):
            transaction_options = {"requires_new": True, "label": "nested"}

        scope = RecordingScope()
        NestedDeposit.run(1, transaction_scope=scope)
        assert scope.calls[0][0] == TransactionOptions(requires_new=True, label="nested")

    def test_missing_scope_is_an_error(self):
        with pytest.raises(InvalidStateError):
            Deposit.run(10)
