import os
from dotenv import load_dotenv

load_dotenv()
class Config:
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL", "sqlite:///skincare_admin.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    ALLOWED_ORIGIN = os.environ.get("ALLOWED_ORIGIN", "http://localhost:3001")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    ORDER_NUMBER_PREFIX = os.environ.get("ORDER_NUMBER_PREFIX", "ORD")
    ORDER_NUMBER_STRATEGY = os.environ.get("ORDER_NUMBER_STRATEGY", "timestamp")  # timestamp, uuid
    ESTIMATED_DELIVERY = os.environ.get("ESTIMATED_DELIVERY", "3-5 business days")

    CLOUDINARY_CLOUD_NAME = os.environ.get("CLOUDINARY_CLOUD_NAME")
    CLOUDINARY_API_KEY = os.environ.get("CLOUDINARY_API_KEY")
    CLOUDINARY_API_SECRET = os.environ.get("CLOUDINARY_API_SECRET")

    SWAGGER = {"title": "Skincare Admin API", "uiversion": 3}


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    ALLOWED_ORIGIN = "http://localhost:3001"
    LOG_LEVEL = "DEBUG"
    ORDER_NUMBER_STRATEGY = "uuid"
    CLOUDINARY_CLOUD_NAME = "demo"
    CLOUDINARY_API_KEY = None
    CLOUDINARY_API_SECRET = None
