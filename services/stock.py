from core.extensions import db
from core.imports import update, logging
from models.productModels import Product

logger = logging.getLogger(__name__)


class StockError(Exception):
    """Raised when a decrement cannot be applied."""


class UnknownProduct(StockError):
    pass


class InsufficientStock(StockError):
    pass


class StockDecrementer:
    """Atomically lower a product's stock by ``quantity``.

    Implementations must fail, leaving the stock untouched, when the
    product does not exist or the decrement would make stock negative.
    """

    def decrement(self, product_id, quantity):
        raise NotImplementedError


class SqlStockDecrementer(StockDecrementer):
    """Single conditional UPDATE inside the caller's transaction."""

    def __init__(self, session=None):
        self.session = session or db.session

    def decrement(self, product_id, quantity):
        if quantity <= 0:
            raise ValueError("quantity must be positive")

        result = self.session.execute(
            update(Product)
            .where(Product.id == product_id, Product.stock >= quantity)
            .values(stock=Product.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 1:
            logger.debug("Decremented product %s by %s", product_id, quantity)
            return

        product = self.session.get(Product, product_id)
        if product is None:
            raise UnknownProduct(f"Product {product_id} not found")
        raise InsufficientStock(
            f"Insufficient stock for product {product_id}: requested {quantity}, available {product.stock}"
        )
