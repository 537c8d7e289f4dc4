from datetime import datetime

FIXED_NOW = datetime(2024, 6, 15, 12, 0, 0)


def make_order(i, **overrides):
    order = {
        "id": str(i),
        "orderId": f"#CM{i:03d}",
        "user": f"User {i}",
        "project": f"Project {i}",
        "address": f"{i} Street",
        "date": f"2024-01-{(i % 28) + 1:02d}",
        "status": "pending",
        "statusColor": "blue",
    }
    order.update(overrides)
    return order
