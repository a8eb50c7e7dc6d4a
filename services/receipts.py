"""Customer-facing receipt for a placed order.

The order row and its items are required. Payment method name and
product images are optional enrichments: a failed or empty lookup is
logged and replaced by a default instead of failing the receipt.
"""
from core.extensions import db
from core.errors import DownstreamError, NotFound
from core.imports import SQLAlchemyError, cloudinary, current_app, logging
from models.orderModels import Order, OrderItem
from models.paymentModels import Payment, PaymentMethod
from models.productModels import ProductImage

logger = logging.getLogger(__name__)

UNKNOWN_PAYMENT_METHOD = "Unknown"


def optional(label, default, resolve, *args):
    """Return ``resolve(*args)``, or ``default`` if it fails or returns nothing."""
    try:
        value = resolve(*args)
    except (SQLAlchemyError, ValueError) as exc:
        db.session.rollback()
        logger.warning("Could not resolve %s, using default: %s", label, exc)
        return default
    return default if value is None else value


def payment_method_name(order_id):
    payment = Payment.query.filter_by(order_id=order_id).first()
    if not payment or not payment.payment_method_id:
        return None
    method = db.session.get(PaymentMethod, payment.payment_method_id)
    return method.name if method else None


def image_url(image):
    if image.image_url:
        return image.image_url
    if image.public_id:
        return cloudinary.CloudinaryImage(image.public_id).build_url(secure=True)
    return None


def primary_images(product_ids):
    """Map product id to the URL of its primary image."""
    if not product_ids:
        return {}
    images = ProductImage.query.filter(
        ProductImage.product_id.in_(product_ids),
        ProductImage.is_primary.is_(True),
    ).all()

    urls = {}
    for image in images:
        url = image_url(image)
        if url and image.product_id not in urls:
            urls[image.product_id] = url
    return urls


def _order_items(order_id):
    try:
        return OrderItem.query.filter_by(order_id=order_id).order_by(OrderItem.id).all()
    except SQLAlchemyError as exc:
        raise DownstreamError("Failed to fetch order items", str(exc))


def build_receipt(order_number):
    try:
        order = Order.query.filter_by(order_number=order_number).first()
    except SQLAlchemyError as exc:
        raise DownstreamError("Failed to fetch order", str(exc))
    if not order:
        raise NotFound("Order not found", f"No order with number {order_number}")

    method_name = optional("payment method", UNKNOWN_PAYMENT_METHOD, payment_method_name, order.id)
    items = _order_items(order.id)
    product_ids = [item.product_id for item in items if item.product_id]
    images = optional("product images", {}, primary_images, product_ids)

    return {
        "orderNumber": order.order_number,
        "date": order.order_date.isoformat() if order.order_date else None,
        "totalAmount": float(order.total_amount),
        "paymentMethod": method_name,
        "items": [
            {
                "name": item.product_name,
                "quantity": item.quantity,
                "price": item.price_per_item,
                "image": images.get(item.product_id, ""),
            }
            for item in items
        ],
        "shippingAddress": {
            "name": order.shipping_recipient_name,
            "address": ", ".join(
                line for line in (order.shipping_address_line1, order.shipping_address_line2) if line
            ),
            "city": order.shipping_city,
            "postalCode": order.shipping_postal_code,
            "province": order.shipping_province,
            "country": order.shipping_country,
        },
        "estimatedDelivery": current_app.config["ESTIMATED_DELIVERY"],
    }
