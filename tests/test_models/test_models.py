from decimal import Decimal

import pytest
from sqlalchemy.exc import IntegrityError

from marketplace.models.models import CartItem, User
from marketplace.models.purchase import Purchase, PurchaseStatus


def test_user_defaults(make_user):
    user = make_user("alice")
    assert user.id is not None
    assert user.is_active is True
    assert user.created_at is not None
    assert user.password_hash != "Secret#123"


def test_email_is_unique(db, make_user):
    make_user("alice", email="alice@example.com")
    db.add(User(display_name="alice2", email="alice@example.com", password_hash="x"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_display_name_is_unique(db, make_user):
    make_user("alice")
    db.add(User(display_name="alice", email="other@example.com", password_hash="x"))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_product_defaults_make_it_listed(make_user, make_product):
    seller = make_user()
    product = make_product(seller)
    assert product.is_active is True
    assert product.is_sold is False
    assert product.is_listed
    assert product.price == Decimal("10.00")
    assert product.seller.id == seller.id


def test_sold_or_inactive_product_is_not_listed(db, make_user, make_product):
    seller = make_user()
    sold = make_product(seller, title="Sold chair")
    sold.is_sold = True
    hidden = make_product(seller, title="Hidden chair")
    hidden.is_active = False
    db.commit()
    assert not sold.is_listed
    assert not hidden.is_listed


def test_one_cart_row_per_user_and_product(db, make_user, make_product):
    buyer = make_user()
    product = make_product(make_user())
    db.add(CartItem(user_id=buyer.id, product_id=product.id, quantity=1))
    db.commit()
    db.add(CartItem(user_id=buyer.id, product_id=product.id, quantity=2))
    with pytest.raises(IntegrityError):
        db.commit()
    db.rollback()


def test_cart_line_total(db, make_user, make_product):
    buyer = make_user()
    product = make_product(make_user(), price="12.50")
    item = CartItem(user_id=buyer.id, product_id=product.id, quantity=3)
    db.add(item)
    db.commit()
    db.refresh(item)
    assert item.line_total == Decimal("37.50")


def test_purchase_status_defaults_to_completed(db, make_user):
    buyer = make_user()
    purchase = Purchase(user_id=buyer.id, total_amount=Decimal("1.00"))
    db.add(purchase)
    db.commit()
    db.refresh(purchase)
    assert purchase.status == PurchaseStatus.completed.value
    assert purchase.purchase_date is not None
    assert purchase.items == []
