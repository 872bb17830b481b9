"""
Visualization and reporting utilities.
"""


def proof_to_string(tree: dict) -> str:
    """One justified line per proof step, parents first."""
    lines = []
    for name, clause in tree.items():
        lines.append(f"{name + '.':<5} {clause}  {clause.justification()}")
    return "\n".join(lines)


def print_state(state):
    """Print the clause sets a ProofState ended with, as # comment lines."""
    print(f"# Final state: {state.status} ({state.szs_status})")
    print(f"# Processed ({len(state.processed)}):")
    for clause in state.processed:
        print(f"#   {clause}")
    print(f"# Unprocessed ({len(state.unprocessed)}):")
    for clause in state.unprocessed:
        print(f"#   {clause}")


def proof_to_dot(tree: dict) -> str:
    """The proof as a Graphviz digraph: an arrow from each parent to each child."""
    lines = [
        "digraph proof {",
        "  rankdir=TB;",
        "  node [shape=box, style=rounded];",
    ]
    for name, clause in tree.items():
        label = f"{name}: {clause.literals_str()}".replace('"', '\\"')
        if clause.is_empty():
            color = "salmon"
        elif not clause.support:
            color = "lightblue"
        else:
            color = "lightgray"
        lines.append(f'  "{name}" [label="{label}", fillcolor={color}, style=filled];')
        for parent in clause.support:
            lines.append(f'  "{parent}" -> "{name}";')
    lines.append("}")
    return "\n".join(lines) + "\n"


def export_dot(tree: dict, path="proof.dot"):
    """Export the proof as a DOT file for Graphviz visualization."""
    with open(path, "w") as f:
        f.write(proof_to_dot(tree))
    print(f"Graph exported to {path}")
