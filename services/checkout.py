"""Order intake: turn a validated checkout payload into an order.

The stages run in a fixed order on one database transaction:

1. resolve the buyer's profile by auth user id
2. insert the order with its shipping snapshot
3. per line item, insert the order item then decrement stock
4. insert a pending payment for the order total
5. delete the buyer's cart items and cart

Nothing is committed until stage 5 has succeeded. Any failure rolls the
session back, so earlier stages never survive a later one failing.
"""
from core.extensions import db
from core.errors import ApiError, Conflict, DownstreamError, NotFound
from core.imports import SQLAlchemyError, contextmanager, current_app, logging
from models.cartModels import Cart, CartItem
from models.orderModels import Order, OrderItem
from models.paymentModels import Payment, PaymentMethod
from models.userModel import Profile
from services.order_numbers import get_order_number_generator
from services.stock import SqlStockDecrementer, StockError

logger = logging.getLogger(__name__)


@contextmanager
def _stage(error_message):
    """Report a database failure inside the block as a 500 with ``error_message``."""
    try:
        yield
    except SQLAlchemyError as exc:
        raise DownstreamError(error_message, str(getattr(exc, "orig", None) or exc))


def _find_replayed_order(idempotency_key, user_id):
    """Order previously placed with this key, which must belong to ``user_id``."""
    if not idempotency_key:
        return None
    with _stage("Failed to look up order"):
        order = Order.query.filter_by(idempotency_key=idempotency_key).first()
        owner = order.profile.user_id if order else None
    if order and owner != user_id:
        raise Conflict("Idempotency key already used", "The key belongs to another buyer's order")
    return order


def _resolve_profile(user_id):
    with _stage("Failed to look up user profile"):
        profile = Profile.query.filter_by(user_id=user_id).first()
    if not profile:
        raise NotFound("User profile not found")
    return profile


def _open_order(profile, payload, idempotency_key=None):
    generate = get_order_number_generator(current_app.config["ORDER_NUMBER_STRATEGY"])
    address = payload.address
    with _stage("Failed to create order"):
        order = Order(
            user_id=profile.id,
            order_number=generate(current_app.config["ORDER_NUMBER_PREFIX"]),
            total_amount=payload.total,
            idempotency_key=idempotency_key,
            shipping_recipient_name=address.recipient_name,
            shipping_phone_number=address.phone_number,
            shipping_address_line1=address.address_line1,
            shipping_address_line2=address.address_line2,
            shipping_city=address.city,
            shipping_province=address.province,
            shipping_postal_code=address.postal_code,
            shipping_country=address.country,
        )
        db.session.add(order)
        db.session.flush()
    return order


def _add_line_item(order, item):
    with _stage("Failed to create order item"):
        db.session.add(OrderItem(
            order_id=order.id,
            product_id=item.id,
            product_name=item.name,
            quantity=item.quantity,
            price_per_item=item.price,
        ))
        db.session.flush()


def _decrement_stock(stock, item):
    with _stage("Failed to update product stock"):
        try:
            stock.decrement(item.id, item.quantity)
        except StockError as exc:
            raise DownstreamError("Failed to update product stock", str(exc))


def _record_payment(order, payment_method_id, amount):
    with _stage("Failed to create payment"):
        method = db.session.get(PaymentMethod, payment_method_id)
        if not method or not method.is_active:
            raise NotFound("Payment method not found", f"No active payment method with id {payment_method_id}")
        payment = Payment(
            order_id=order.id,
            payment_method_id=method.id,
            amount=amount,
            status="pending",
        )
        db.session.add(payment)
        db.session.flush()
    return payment


def _clear_cart(user_id):
    with _stage("Failed to look up cart"):
        cart = Cart.query.filter_by(user_id=user_id).first()
    if not cart:
        raise NotFound("Cart not found for user")

    with _stage("Failed to delete cart items"):
        CartItem.query.filter_by(cart_id=cart.id).delete()
    with _stage("Failed to delete cart"):
        Cart.query.filter_by(id=cart.id).delete()


def place_order(payload, idempotency_key=None, stock=None):
    """Run the intake stages for ``payload`` and return the committed order.

    Raises an ``ApiError`` subclass on failure, after rolling back.
    A repeated ``idempotency_key`` returns the order it first produced.
    """
    stock = stock or SqlStockDecrementer(db.session)
    user_id = str(payload.user_id)

    try:
        replayed = _find_replayed_order(idempotency_key, user_id)
        if replayed:
            logger.info("Replaying order %s for idempotency key %s", replayed.order_number, idempotency_key)
            return replayed

        profile = _resolve_profile(user_id)
        order = _open_order(profile, payload, idempotency_key)
        logger.info("Opened order %s for profile %s", order.order_number, profile.id)

        for item in payload.items:
            _add_line_item(order, item)
            _decrement_stock(stock, item)

        _record_payment(order, payload.payment_method_id, payload.total)
        _clear_cart(user_id)

        with _stage("Failed to create order"):
            db.session.commit()
    except ApiError as err:
        db.session.rollback()
        logger.warning("Order intake for user %s failed: %s (%s)", user_id, err.error, err.details)
        raise
    except Exception:
        db.session.rollback()
        logger.exception("Order intake for user %s aborted", user_id)
        raise

    logger.info("Order %s placed with %d item(s)", order.order_number, len(payload.items))
    return order
