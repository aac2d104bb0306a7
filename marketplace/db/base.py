# Import every model so Base.metadata knows all tables before create_all
from marketplace.db.session import Base  # noqa: F401
from marketplace.models.models import User, CartItem  # noqa: F401
from marketplace.models.product import Product  # noqa: F401
from marketplace.models.purchase import Purchase, PurchaseItem  # noqa: F401
