"""Assemble the payment processing workflow."""

from langgraph.graph import END, START, StateGraph

from ..repository import InvoiceRepository
from .nodes.apply import handle_apply
from .nodes.describe import handle_describe
from .nodes.lookup import handle_zero_amount, make_lookup_node, route_invoice
from .state import PaymentState


def build_workflow(repository: InvoiceRepository):
    """Compile the payment graph around an invoice repository."""

    builder = StateGraph(PaymentState)

    # Register nodes
    builder.add_node("lookup", make_lookup_node(repository))
    builder.add_node("zero_amount", handle_zero_amount)
    builder.add_node("describe", handle_describe)
    builder.add_node("apply", handle_apply)

    # Entry point
    builder.add_edge(START, "lookup")

    # Invoices with nothing due never reach the mutation step
    builder.add_conditional_edges(
        "lookup",
        route_invoice,
        {
            "zero_amount": "zero_amount",
            "describe": "describe",
        },
    )

    # The status is derived before the payment is recorded
    builder.add_edge("describe", "apply")

    builder.add_edge("apply", END)
    builder.add_edge("zero_amount", END)

    return builder.compile()
