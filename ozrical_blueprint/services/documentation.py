"""
Markdown documentation export for a blueprint: nodes, edges, access gates,
access contexts and the user profile.
"""

from ozrical_blueprint.models.contracts.blueprint import BlueprintDocument
from ozrical_blueprint.services.graph_inference import nodes_by_id

DASH = "—"


def export_blueprint_documentation(doc: BlueprintDocument) -> str:
    """Render technical documentation for ``doc`` as Markdown."""
    nodes = nodes_by_id(doc)
    lines: list[str] = [
        "# Blueprint Documentation",
        "",
        f"Version: {doc.version}",
        f"Entry node: {doc.entry_node_id or DASH}",
        "",
        "## Nodes",
        "",
    ]
    for node in doc.nodes:
        lines.append(f"- **{node.label or node.id}** (`{node.type}`) {DASH} `{node.id}`")

    lines.extend(["", "## Edges", ""])
    for edge in doc.edges:
        source = nodes.get(edge.source_node_id)
        target = nodes.get(edge.target_node_id)
        source_name = source.label if source else edge.source_node_id
        target_name = target.label if target else edge.target_node_id
        lines.append(f"- {source_name} → {target_name}")

    lines.extend(["", "## Access Gates", ""])
    for gate_id, gate in doc.definitions.access_gates.items():
        line = f"- **{gate_id}**: roles `{', '.join(gate.allowed_roles)}`"
        if gate.expression:
            line += f" {DASH} expression: `{gate.expression}`"
        lines.append(line)

    lines.extend(["", "## Access Contexts", ""])
    for context_id, context in doc.definitions.access_contexts.items():
        modes = "; ".join(f"{role}: {mode}" for role, mode in context.access_mode_by_role.items())
        lines.append(f"- **{context_id}**: {modes or DASH}")

    lines.extend(["", "## User Profile", ""])
    lines.append(f"Roles: {', '.join(doc.definitions.user_profile.roles) or DASH}")
    return "\n".join(lines)
