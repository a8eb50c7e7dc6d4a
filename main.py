from core.imports import Flask, cloudinary
from core.config import Config
from core.extensions import db, swagger, cors, migrate
from core.errors import register_error_handlers
from core.log import configure_logging
from core.seed import seed_all
from routes.orders import orders_bp


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)

    db.init_app(app)
    swagger.init_app(app)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["ALLOWED_ORIGIN"]}},
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "Idempotency-Key"],
        max_age=86400,
    )
    migrate.init_app(app, db)

    cloudinary.config(
        cloud_name=app.config["CLOUDINARY_CLOUD_NAME"],
        api_key=app.config["CLOUDINARY_API_KEY"],
        api_secret=app.config["CLOUDINARY_API_SECRET"],
        secure=True,
    )

    register_error_handlers(app)
    app.register_blueprint(orders_bp)

    @app.route('/ping')
    def ping():
        return "Ping received", 200

    @app.cli.command("seed-demo")
    def seed_demo():
        """Create tables and load demo profile, products, payment methods and cart."""
        db.create_all()
        seed_all()

    return app

app = create_app()


if __name__ == "__main__":
    with app.app_context():
        db.create_all()
        seed_all()

    app.run(debug=True)
