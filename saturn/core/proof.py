"""
Proof reconstruction.

After the search derives the empty clause, walk back through the support
links to every clause the refutation used, order them so that each parent
comes before its children, and renumber them 1..n for display.

Support links are names, looked up in the archive: the record of every
clause that ever entered the processed set. A clause removed later by
backward subsumption is still there, so its descendants stay explainable.
"""

import networkx as nx

from .clauses import Clause


def collect_proof_clauses(witness: Clause, archive: dict) -> dict:
    """
    Transitive closure of support links from witness.

    Returns {name: clause}. A support name that is not in the archive
    raises KeyError: the derivation record is broken.
    """
    found = {witness.name: witness}
    pending = [witness]
    while pending:
        clause = pending.pop()
        for parent_name in clause.support:
            if parent_name in found:
                continue
            if parent_name not in archive:
                raise KeyError(
                    f"{clause.name} is supported by {parent_name}, which was never processed"
                )
            parent = archive[parent_name]
            found[parent_name] = parent
            pending.append(parent)
    return found


def derivation_graph(clauses: dict) -> nx.DiGraph:
    """One node per clause name, an edge parent -> child for every support link."""
    graph = nx.DiGraph()
    for name, clause in clauses.items():
        graph.add_node(name, clause=clause)
        for parent_name in clause.support:
            graph.add_edge(parent_name, name)
    return graph


def proof_order(graph: nx.DiGraph, key=None) -> list:
    """
    Kahn's topological sort: clauses with no unplaced parents go first.
    Among the ready clauses the smallest key wins. Raises
    networkx.NetworkXUnfeasible if the support links contain a cycle.
    """
    return list(nx.lexicographical_topological_sort(graph, key=key))


def generate_proof_tree(witness: Clause, archive: dict) -> dict:
    """
    The refutation as {display_name: clause}, in derivation order.

    Display names are "1", "2", ... Every clause is copied with its new name
    and its support renamed to match; the originals are left untouched.
    """
    clauses = collect_proof_clauses(witness, archive)
    age = {name: i for i, name in enumerate(archive)}
    graph = derivation_graph(clauses)
    order = proof_order(graph, key=lambda name: (age.get(name, len(age)), name))

    # First pass: decide every new name. Second pass: rewrite.
    renaming = {old: str(i) for i, old in enumerate(order, start=1)}
    tree = {}
    for old in order:
        clause = clauses[old]
        tree[renaming[old]] = clause.with_name(renaming[old]).with_support(
            renaming[parent] for parent in clause.support
        )
    return tree
