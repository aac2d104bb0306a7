from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import relationship
from marketplace.db.session import Base
from marketplace.models.models import utcnow


class Product(Base):
    __tablename__ = "products"
    __table_args__ = (
        # Catalog queries: active, unsold, newest first
        Index("ix_products_listing", "is_active", "is_sold", "created_at"),
    )

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(100), nullable=False)
    description = Column(String(500), nullable=True)
    category = Column(String(50), nullable=False, index=True)
    price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    # Second-hand details
    condition_type = Column(String(20), nullable=True)
    brand = Column(String(50), nullable=True)
    model = Column(String(50), nullable=True)
    year_manufactured = Column(Integer, nullable=True)
    dimensions = Column(String(100), nullable=True)
    weight = Column(Numeric(8, 2), nullable=True)
    material = Column(String(50), nullable=True)
    color = Column(String(30), nullable=True)
    original_packaging = Column(Boolean, default=False)
    manual_included = Column(Boolean, default=False)
    working_condition = Column(String(200), nullable=True)
    image_url = Column(String, nullable=True)

    is_active = Column(Boolean, nullable=False, default=True)
    is_sold = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    seller_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    seller = relationship("User", back_populates="products")

    @property
    def is_listed(self) -> bool:
        return bool(self.is_active) and not self.is_sold

    def __repr__(self):
        return f"<Product(id={self.id}, title={self.title!r}, price={self.price})>"
