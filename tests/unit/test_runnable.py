"""
Runnable state machine: errors, result lifecycle, validity check.
"""

import pytest

from gatecore.core.errors import UnimplementedError
from gatecore.core.runnable import Runnable, RunState, Validity, validation_rule
from gatecore.core.validate import ErrorCollector, PredicateRule


def make_class(name="Sample"):
    """Fresh subclass per test so registered rules never leak"""
    return type(name, (Runnable,), {})


def fail_base(interaction):
    interaction.errors.add("base")


@pytest.fixture
def klass():
    return make_class()


@pytest.fixture
def instance(klass):
    return klass()


def test_errors_is_a_collector(instance):
    assert isinstance(instance.errors, ErrorCollector)
    assert instance.errors.is_empty()


def test_new_instance_is_unvalidated(instance):
    assert instance.state is RunState.UNVALIDATED


def test_execute_is_unimplemented(instance):
    with pytest.raises(UnimplementedError) as exc_info:
        instance.execute()

    assert isinstance(exc_info.value, NotImplementedError)
    assert exc_info.value.error_code == "NOT_IMPLEMENTED"
    assert "execute" in exc_info.value.message


class TestResult:

    def test_starts_unset(self, instance):
        assert instance.result is None

    def test_sets_the_result(self, instance):
        value = object()
        instance.result = value
        assert instance.result is value

    def test_rejected_while_errors_present(self, instance):
        instance.errors.add("base")
        instance.result = 42
        assert instance.result is None

    def test_rejection_keeps_previous_value(self, instance):
        instance.result = 1
        instance.errors.add("base")
        instance.result = 2
        assert instance.result == 1

    def test_setter_does_not_run_rules(self, klass, instance):
        klass.validate(fail_base)
        instance.result = 42
        assert instance.result == 42
        assert instance.errors.is_empty()


class TestValidityCheck:

    def test_valid_without_rules(self, instance):
        outcome = instance.validity_check()
        assert outcome is Validity.VALID
        assert outcome
        assert instance.state is RunState.VALID

    def test_clears_errors_added_outside_a_pass(self, instance):
        instance.errors.add("base")
        assert instance.validity_check() is Validity.VALID
        assert instance.errors.is_empty()

    def test_invalid_with_failing_rule(self, klass, instance):
        klass.validate(fail_base)
        outcome = instance.validity_check()
        assert outcome is Validity.INVALID
        assert not outcome
        assert outcome is not False
        assert instance.state is RunState.INVALID

    def test_invalid_resets_result(self, klass, instance):
        klass.validate(fail_base)
        instance.result = 42
        instance.validity_check()
        assert instance.result is None

    def test_valid_keeps_result(self, instance):
        instance.result = 42
        instance.validity_check()
        assert instance.result == 42

    def test_idempotent(self, klass, instance):
        klass.validate(fail_base)
        klass.validate(PredicateRule("positive", lambda i: False, "must be positive", key="amount"))

        first = instance.validity_check()
        first_errors = instance.errors.messages()
        second = instance.validity_check()

        assert first is second is Validity.INVALID
        assert instance.errors.messages() == first_errors
        assert instance.errors.messages() == {"base": ["is invalid"], "amount": ["must be positive"]}

    def test_all_rules_run(self, klass, instance):
        calls = []
        klass.validate(lambda i: calls.append("a") or i.errors.add("a"))
        klass.validate(lambda i: calls.append("b") or i.errors.add("b"))
        instance.validity_check()
        assert calls == ["a", "b"]
        assert instance.errors.keys() == ["a", "b"]

    def test_is_valid_returns_bool(self, klass, instance):
        assert instance.is_valid() is True
        klass.validate(fail_base)
        assert instance.is_valid() is False

    def test_rule_exception_propagates(self, klass, instance):
        def broken(interaction):
            raise KeyError("missing")

        klass.validate(broken)
        with pytest.raises(KeyError):
            instance.validity_check()


class TestRuleRegistration:

    def test_marked_methods_are_registered_in_order(self):
        class Transfer(Runnable):
            def __init__(self, amount):
                super().__init__()
                self.amount = amount

            @validation_rule
            def _positive(self):
                if self.amount <= 0:
                    self.errors.add("amount", "must be positive")

            @validation_rule
            def _limit(self):
                if self.amount > 100:
                    self.errors.add("amount", "must not exceed 100")

        assert len(Transfer.validator()) == 2
        assert Transfer(-1).validity_check() is Validity.INVALID
        assert Transfer(50).validity_check() is Validity.VALID

    def test_subclass_inherits_parent_rules(self):
        parent = make_class("Parent")
        parent.validate(fail_base)
        child = type("Child", (parent,), {})

        assert child().validity_check() is Validity.INVALID

    def test_rules_added_to_subclass_do_not_reach_parent(self):
        parent = make_class("Parent")
        child = type("Child", (parent,), {})
        child.validate(fail_base)

        assert parent().validity_check() is Validity.VALID
        assert child().validity_check() is Validity.INVALID

    def test_validate_works_as_decorator(self, klass):
        @klass.validate
        def always_fails(interaction):
            interaction.errors.add("base", "nope")

        assert callable(always_fails)
        instance = klass()
        instance.validity_check()
        assert instance.errors["base"] == ["nope"]

    def test_rejects_non_rule(self, klass):
        with pytest.raises(TypeError):
            klass.validate(42)

    def test_overridden_rule_method_replaces_parent_rule(self):
        class Parent(Runnable):
            @validation_rule
            def _check(self):
                self.errors.add("base", "parent rule")

            def execute(self):
                return "ok"

        class Child(Parent):
            def _check(self):
                pass

        assert Parent.run().errors.to_dict() == {"base": ["parent rule"]}
        outcome = Child.run()
        assert outcome.errors.is_empty()
        assert outcome.result == "ok"

    def test_redecorated_override_registers_once(self):
        class Parent(Runnable):
            @validation_rule
            def _check(self):
                self.errors.add("base", "parent rule")

        class Child(Parent):
            @validation_rule
            def _check(self):
                self.errors.add("base", "child rule")

        assert len(Child.validator()) == 1
        child = Child()
        child.validity_check()
        assert child.errors.to_dict() == {"base": ["child rule"]}
