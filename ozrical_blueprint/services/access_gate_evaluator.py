"""
Access Gate Evaluator

Decides whether a session may pass an access gate defined in
``definitions.access_gates``.

Rules:
- unknown gate id -> False (fail closed; never reinterpret as a pass)
- the session needs at least one role in the gate's ``allowed_roles``;
  an empty ``allowed_roles`` never passes
- only when the role check passes is the optional ``expression`` handed to
  the configured ExpressionEvaluator

The expression language is a placeholder: the default evaluator honours the
literals "true" / "false" and lets anything else through. A real rules
engine can be plugged in through ExpressionEvaluator without touching the
role-matching contract.
"""

from __future__ import annotations

import logging
from typing import Protocol

from ozrical_blueprint.models.contracts.blueprint import BlueprintDocument
from ozrical_blueprint.models.contracts.session import SessionContext

logger = logging.getLogger(__name__)


class ExpressionEvaluator(Protocol):
    """Strategy for the secondary, expression-based gate check."""

    def evaluate_expression(self, expression: str, context: SessionContext) -> bool:
        ...


class LiteralExpressionEvaluator:
    """Only the literals "true" and "false" are meaningful; everything else passes."""

    def evaluate_expression(self, expression: str, context: SessionContext) -> bool:
        trimmed = expression.strip()
        if trimmed == "false":
            return False
        return True


class AccessGateEvaluator:
    """Evaluates access gate definitions against a session context."""

    def __init__(self, expression_evaluator: ExpressionEvaluator | None = None):
        self.expression_evaluator = expression_evaluator or LiteralExpressionEvaluator()

    def evaluate(
        self,
        gate_id: str,
        context: SessionContext,
        blueprint: BlueprintDocument,
    ) -> bool:
        """
        Check whether ``context`` passes gate ``gate_id``.

        Args:
            gate_id: Key into ``blueprint.definitions.access_gates``
            context: Session being evaluated
            blueprint: Document holding the gate definitions

        Returns:
            True if the gate passes, False otherwise (including unknown gates)
        """
        gate = blueprint.definitions.access_gates.get(gate_id)
        if gate is None:
            logger.debug(f"Access gate '{gate_id}' is not defined; denying")
            return False

        user_roles = set(context.roles)
        if not any(role in user_roles for role in gate.allowed_roles):
            return False

        if gate.expression and gate.expression.strip():
            return self.expression_evaluator.evaluate_expression(gate.expression, context)
        return True


_default_evaluator = AccessGateEvaluator()


def evaluate_access_gate(
    gate_id: str,
    context: SessionContext | dict,
    blueprint: BlueprintDocument,
) -> bool:
    """Evaluate a gate with the default (literal) expression evaluator."""
    if isinstance(context, dict):
        context = SessionContext.model_validate(context)
    return _default_evaluator.evaluate(gate_id, context, blueprint)
