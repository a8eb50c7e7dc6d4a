from core.imports import time, uuid


def timestamp_order_number(prefix="ORD"):
    """Prefix plus the current time in milliseconds, e.g. ``ORD1718000000000``.

    Two requests inside the same millisecond get the same number; the
    unique index on ``orders.order_number`` rejects the second one.
    """
    return f"{prefix}{int(time.time() * 1000)}"


def uuid_order_number(prefix="ORD"):
    return f"{prefix}{uuid.uuid4().hex[:12].upper()}"


GENERATORS = {
    "timestamp": timestamp_order_number,
    "uuid": uuid_order_number,
}


def get_order_number_generator(strategy):
    try:
        return GENERATORS[strategy]
    except KeyError:
        raise ValueError(f"Unknown order number strategy: {strategy!r}")
