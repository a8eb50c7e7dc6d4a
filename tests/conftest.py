import pytest

from core.config import TestConfig
from core.extensions import db
from main import create_app
from models.cartModels import Cart, CartItem
from models.paymentModels import PaymentMethod
from models.productModels import Product, ProductImage
from models.userModel import Profile

BUYER_ID = "8b6f0c2e-1d4a-4c7b-9f3e-5a2d1c0b9e77"
STRANGER_ID = "00000000-0000-4000-8000-000000000000"


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def catalog(app):
    """Buyer profile, two products with stock, payment methods and a filled cart."""
    profile = Profile(user_id=BUYER_ID, full_name="Ayu Lestari", phone="081234567890")
    serum = Product(name="Hydrating Serum", price=120000, stock=10)
    cleanser = Product(name="Gentle Cleanser", price=85000, stock=5)
    serum.images.append(ProductImage(image_url="https://img.example.com/serum.jpg", is_primary=True))
    serum.images.append(ProductImage(image_url="https://img.example.com/serum-back.jpg", is_primary=False))
    bank = PaymentMethod(name="Bank Transfer", code="BANK_TRANSFER")
    retired = PaymentMethod(name="Old Gateway", code="OLD_GATEWAY", is_active=False)
    db.session.add_all([profile, serum, cleanser, bank, retired])
    db.session.flush()

    cart = Cart(user_id=BUYER_ID)
    db.session.add(cart)
    db.session.flush()
    db.session.add_all([
        CartItem(cart_id=cart.id, product_id=serum.id, quantity=2),
        CartItem(cart_id=cart.id, product_id=cleanser.id, quantity=1),
    ])
    db.session.commit()

    return {
        "profile_id": profile.id,
        "serum_id": serum.id,
        "cleanser_id": cleanser.id,
        "bank_id": bank.id,
        "retired_id": retired.id,
        "cart_id": cart.id,
    }


@pytest.fixture
def payload(catalog):
    return {
        "user_id": BUYER_ID,
        "address": {
            "recipient_name": "Ayu Lestari",
            "phone_number": "081234567890",
            "address_line1": "Jl. Melati No. 12",
            "address_line2": "Blok C",
            "city": "Bandung",
            "province": "Jawa Barat",
            "postal_code": "40115",
            "country": "Indonesia",
        },
        "payment_method_id": catalog["bank_id"],
        "items": [
            {"id": catalog["serum_id"], "name": "Hydrating Serum", "price": 120000, "quantity": 2},
            {"id": catalog["cleanser_id"], "name": "Gentle Cleanser", "price": 85000, "quantity": 1},
        ],
        "subtotal": 325000,
        "shipping": 15000,
        "tax": 0,
        "total": 340000,
    }
