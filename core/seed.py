from core.extensions import db
from models.userModel import Profile
from models.productModels import Category, Product, ProductImage
from models.paymentModels import PaymentMethod
from models.cartModels import Cart, CartItem

DEMO_USER_ID = "3f1c2a9e-6d0b-4f6e-9a51-2a7c9d0b8e11"


def seed_demo_profile():
    profile = Profile.query.filter_by(user_id=DEMO_USER_ID).first()
    if not profile:
        profile = Profile(
            user_id=DEMO_USER_ID,
            full_name="Ayu Lestari",
            role="customer",
            phone="081234567890"
        )
        db.session.add(profile)
        db.session.commit()
        print(f"✅ Demo profile created (user_id={DEMO_USER_ID})")
    else:
        print("ℹ️ Demo profile already exists.")
    return profile


def seed_payment_methods():
    methods = [
        {"name": "Bank Transfer", "code": "BANK_TRANSFER", "display_order": 1},
        {"name": "E-Wallet", "code": "E_WALLET", "display_order": 2},
        {"name": "Cash on Delivery", "code": "COD", "display_order": 3},
    ]
    created = []
    for data in methods:
        if not PaymentMethod.query.filter_by(code=data["code"]).first():
            db.session.add(PaymentMethod(**data))
            created.append(data["name"])
    db.session.commit()
    if created:
        print(f"✅ Payment methods created: {', '.join(created)}")
    else:
        print("ℹ️ Payment methods already exist.")


def seed_products():
    sample_products = [
        {
            "name": "Hydrating Serum",
            "price": 120000,
            "stock": 50,
            "category": "Serum",
            "image": "https://res.cloudinary.com/demo/image/upload/sample.jpg"
        },
        {
            "name": "Gentle Cleanser",
            "price": 85000,
            "stock": 80,
            "category": "Cleanser",
            "image": "https://res.cloudinary.com/demo/image/upload/sample.jpg"
        },
        {
            "name": "Daily Sunscreen SPF 50",
            "price": 99000,
            "stock": 0,
            "category": "Sunscreen",
            "image": None
        }
    ]

    for prod in sample_products:
        if Product.query.filter_by(name=prod["name"]).first():
            print(f"ℹ️ Product already exists: {prod['name']}")
            continue

        category = Category.query.filter_by(name=prod["category"]).first()
        if not category:
            category = Category(name=prod["category"])
            db.session.add(category)

        product = Product(name=prod["name"], price=prod["price"], stock=prod["stock"], category=category)
        if prod["image"]:
            product.images.append(ProductImage(image_url=prod["image"], is_primary=True))
        db.session.add(product)
        print(f"✅ Product added: {prod['name']}")
    db.session.commit()


def seed_demo_cart():
    cart = Cart.query.filter_by(user_id=DEMO_USER_ID).first()
    if cart:
        print("ℹ️ Demo cart already exists.")
        return cart

    product = Product.query.filter_by(name="Hydrating Serum").first()
    if not product:
        print("❌ No demo product found. Run seed_products() first.")
        return None

    cart = Cart(user_id=DEMO_USER_ID)
    db.session.add(cart)
    db.session.flush()
    db.session.add(CartItem(cart_id=cart.id, product_id=product.id, quantity=2))
    db.session.commit()
    print(f"✅ Demo cart created for {DEMO_USER_ID}")
    return cart


def seed_all():
    seed_demo_profile()
    seed_payment_methods()
    seed_products()
    seed_demo_cart()
