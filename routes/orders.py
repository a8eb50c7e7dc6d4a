from core.imports import Blueprint, jsonify, request, re
from core.errors import ValidationFailed
from services.checkout import place_order
from services.receipts import build_receipt
from services.schemas import parse_place_order

orders_bp = Blueprint('orders', __name__)

ORDER_NUMBER_PATTERN = re.compile(r"[A-Za-z0-9_-]{1,64}")


@orders_bp.route('/api/orders', methods=['POST'])
def create_order():
    """
    Place an order from the buyer's checkout
    ---
    tags:
      - Orders
    summary: Create an order, its items and a pending payment, then clear the cart
    description: >
      All writes happen in one transaction. If any step fails nothing is kept:
      no order, no order items, no stock change, no payment, and the cart stays.
    consumes:
      - application/json
    parameters:
      - name: Idempotency-Key
        in: header
        required: false
        type: string
        description: Replaying a key returns the order it first created
      - name: body
        in: body
        required: true
        schema:
          type: object
          required:
            - user_id
            - address
            - payment_method_id
            - items
            - subtotal
            - shipping
            - tax
            - total
          properties:
            user_id:
              type: string
              format: uuid
              example: "3f1c2a9e-6d0b-4f6e-9a51-2a7c9d0b8e11"
            address:
              type: object
              properties:
                recipient_name:
                  type: string
                  example: "Ayu Lestari"
                phone_number:
                  type: string
                  example: "081234567890"
                address_line1:
                  type: string
                  example: "Jl. Melati No. 12"
                address_line2:
                  type: string
                  example: "Blok C"
                city:
                  type: string
                  example: "Bandung"
                province:
                  type: string
                  example: "Jawa Barat"
                postal_code:
                  type: string
                  example: "40115"
                country:
                  type: string
                  example: "Indonesia"
            payment_method_id:
              type: integer
              example: 1
            items:
              type: array
              minItems: 1
              items:
                type: object
                properties:
                  id:
                    type: integer
                    example: 2
                  name:
                    type: string
                    example: "Hydrating Serum"
                  price:
                    type: number
                    example: 120000
                  quantity:
                    type: integer
                    example: 2
            subtotal:
              type: number
              example: 240000
            shipping:
              type: number
              example: 15000
            tax:
              type: number
              example: 0
            total:
              type: number
              example: 255000
    responses:
      200:
        description: Order placed
        schema:
          type: object
          properties:
            order_id:
              type: integer
              example: 10
            order_number:
              type: string
              example: "ORD1718000000000"
      400:
        description: Invalid data format
      404:
        description: User profile, payment method or cart not found
      409:
        description: Idempotency key already used by another buyer
      500:
        description: A database step failed; all writes were rolled back
    """
    payload = parse_place_order(request.get_data())
    order = place_order(payload, idempotency_key=request.headers.get("Idempotency-Key") or None)

    return jsonify({
        "order_id": order.id,
        "order_number": order.order_number
    }), 200


@orders_bp.route('/api/orders/<order_number>', methods=['GET'])
def get_order_receipt(order_number):
    """
    Get an order receipt
    ---
    tags:
      - Orders
    summary: Receipt for an order number
    description: >
      Joins the order, its payment method, its items and each item's primary image.
      A missing payment or image does not fail the request; defaults are used.
    parameters:
      - name: order_number
        in: path
        required: true
        type: string
        example: "ORD1718000000000"
    responses:
      200:
        description: Order receipt
        schema:
          type: object
          properties:
            orderNumber:
              type: string
              example: "ORD1718000000000"
            date:
              type: string
              example: "2025-06-10T08:30:00"
            totalAmount:
              type: number
              example: 255000
            paymentMethod:
              type: string
              example: "Bank Transfer"
            items:
              type: array
              items:
                type: object
                properties:
                  name:
                    type: string
                    example: "Hydrating Serum"
                  quantity:
                    type: integer
                    example: 2
                  price:
                    type: number
                    example: 120000
                  image:
                    type: string
                    example: "https://res.cloudinary.com/demo/image/upload/serum.jpg"
            shippingAddress:
              type: object
            estimatedDelivery:
              type: string
              example: "3-5 business days"
      400:
        description: Invalid order number format
      404:
        description: Order not found
      500:
        description: Failed to fetch order items
    """
    if not ORDER_NUMBER_PATTERN.fullmatch(order_number):
        raise ValidationFailed("Invalid order number format")

    return jsonify(build_receipt(order_number)), 200
