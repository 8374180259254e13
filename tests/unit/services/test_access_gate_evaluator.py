"""Unit tests for access gate evaluation."""

import pytest

from ozrical_blueprint.models.contracts.session import SessionContext
from ozrical_blueprint.services.access_gate_evaluator import (
    AccessGateEvaluator,
    LiteralExpressionEvaluator,
    evaluate_access_gate,
)
from tests.helpers.factories import build_document


class RecordingExpressionEvaluator:
    """Expression strategy that records calls and returns a fixed answer."""

    def __init__(self, answer: bool):
        self.answer = answer
        self.calls: list[tuple[str, SessionContext]] = []

    def evaluate_expression(self, expression: str, context: SessionContext) -> bool:
        self.calls.append((expression, context))
        return self.answer


def gated_document(**gate_fields):
    return build_document(gates={"g1": {"id": "g1", **gate_fields}})


class TestRoleMatching:
    def test_matching_role_passes(self, sample_blueprint):
        assert evaluate_access_gate("g1", {"roles": ["admin"]}, sample_blueprint) is True

    def test_any_overlap_is_enough(self, sample_blueprint):
        assert evaluate_access_gate("g1", SessionContext(roles=["viewer", "editor"]), sample_blueprint) is True

    def test_no_matching_role_fails(self, sample_blueprint):
        assert evaluate_access_gate("g1", {"roles": ["viewer"]}, sample_blueprint) is False

    def test_no_roles_fails(self, sample_blueprint):
        assert evaluate_access_gate("g1", SessionContext(), sample_blueprint) is False

    def test_empty_allowed_roles_never_passes(self):
        doc = gated_document(allowedRoles=[])

        assert evaluate_access_gate("g1", {"roles": ["admin"]}, doc) is False

    @pytest.mark.parametrize("roles", [[], ["admin"], ["admin", "editor", "viewer"]])
    def test_unknown_gate_fails_closed(self, sample_blueprint, roles):
        assert evaluate_access_gate("nonexistent-gate-id", {"roles": roles}, sample_blueprint) is False


class TestExpressions:
    @pytest.mark.parametrize(
        "expression,expected",
        [
            ("true", True),
            ("false", False),
            ("  false  ", False),
            ("user.age > 18", True),
            ("", True),
            ("   ", True),
        ],
    )
    def test_literal_expressions(self, expression, expected):
        doc = gated_document(allowedRoles=["admin"], expression=expression)

        assert evaluate_access_gate("g1", {"roles": ["admin"]}, doc) is expected

    def test_custom_strategy_receives_expression_and_context(self):
        doc = gated_document(allowedRoles=["admin"], expression="user.age > 18")
        strategy = RecordingExpressionEvaluator(answer=False)
        context = SessionContext(roles=["admin"], user_id="u1")

        passed = AccessGateEvaluator(strategy).evaluate("g1", context, doc)

        assert passed is False
        assert strategy.calls == [("user.age > 18", context)]

    def test_expression_skipped_when_roles_fail(self):
        doc = gated_document(allowedRoles=["admin"], expression="true")
        strategy = RecordingExpressionEvaluator(answer=True)

        passed = AccessGateEvaluator(strategy).evaluate("g1", SessionContext(roles=["viewer"]), doc)

        assert passed is False
        assert strategy.calls == []

    def test_expression_skipped_when_absent(self, sample_blueprint):
        strategy = RecordingExpressionEvaluator(answer=False)

        assert AccessGateEvaluator(strategy).evaluate("g1", SessionContext(roles=["admin"]), sample_blueprint) is True
        assert strategy.calls == []

    def test_default_strategy(self):
        evaluator = AccessGateEvaluator()

        assert isinstance(evaluator.expression_evaluator, LiteralExpressionEvaluator)
