"""Domain constants for clients, orders and expenses."""

ORDER_STATUS_PENDING = "pending"
ORDER_STATUS_COMPLETE = "complete"
ORDER_STATUS_OVERDUE = "overdue"

ORDER_STATUSES = (
    ORDER_STATUS_PENDING,
    ORDER_STATUS_COMPLETE,
    ORDER_STATUS_OVERDUE,
)

PAYMENT_STATUS_PAID = "paid"
PAYMENT_STATUS_UNPAID = "unpaid"
PAYMENT_STATUS_PARTIAL = "partial"

PAYMENT_STATUSES = (
    PAYMENT_STATUS_PAID,
    PAYMENT_STATUS_UNPAID,
    PAYMENT_STATUS_PARTIAL,
)

EXPENSE_CATEGORY_LABELS = {
    "tools": "Tools & Software",
    "communication": "Communication",
    "utilities": "Utilities",
    "supplies": "Supplies",
    "travel": "Travel",
    "other": "Other",
}

EXPENSE_CATEGORIES = tuple(EXPENSE_CATEGORY_LABELS)

# Allowed (current, target) pairs; nothing leaves "complete".
ORDER_STATUS_TRANSITIONS = frozenset(
    {
        (ORDER_STATUS_PENDING, ORDER_STATUS_OVERDUE),
        (ORDER_STATUS_PENDING, ORDER_STATUS_COMPLETE),
        (ORDER_STATUS_OVERDUE, ORDER_STATUS_COMPLETE),
    }
)

UNKNOWN_CLIENT_NAME = "Unknown Client"

TOP_CLIENTS_LIMIT = 5

REVENUE_RULE_HALF_OF_COST = "half_of_cost"
REVENUE_RULE_AMOUNT_PAID = "amount_paid"

REVENUE_RULES = (REVENUE_RULE_HALF_OF_COST, REVENUE_RULE_AMOUNT_PAID)


__all__ = [
    "ORDER_STATUS_PENDING",
    "ORDER_STATUS_COMPLETE",
    "ORDER_STATUS_OVERDUE",
    "ORDER_STATUSES",
    "PAYMENT_STATUS_PAID",
    "PAYMENT_STATUS_UNPAID",
    "PAYMENT_STATUS_PARTIAL",
    "PAYMENT_STATUSES",
    "EXPENSE_CATEGORY_LABELS",
    "EXPENSE_CATEGORIES",
    "ORDER_STATUS_TRANSITIONS",
    "UNKNOWN_CLIENT_NAME",
    "TOP_CLIENTS_LIMIT",
    "REVENUE_RULE_HALF_OF_COST",
    "REVENUE_RULE_AMOUNT_PAID",
    "REVENUE_RULES",
]
