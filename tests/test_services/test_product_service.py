from decimal import Decimal

import pytest

from marketplace.core.exceptions import NotFoundError
from marketplace.schemas.product import ProductRequest
from marketplace.services.product_service import CATEGORIES, CONDITION_TYPES, ProductService


def request(**overrides):
    fields = {"title": "Road bike", "category": "Sports", "price": Decimal("120.00"), "quantity": 1}
    fields.update(overrides)
    return ProductRequest(**fields)


def test_create_product_for_seller(db, make_user):
    seller = make_user("seller")
    product = ProductService.create_product(
        db, request(condition_type="Good", brand="Trek", weight=Decimal("9.5")), seller.id
    )
    assert product.id is not None
    assert product.seller_id == seller.id
    assert product.price == Decimal("120.00")
    assert product.brand == "Trek"
    assert product.is_listed


def test_create_product_unknown_seller(db):
    with pytest.raises(NotFoundError):
        ProductService.create_product(db, request(), 999)


def test_listing_is_newest_first_and_hides_inactive_or_sold(db, make_user, make_product):
    seller = make_user("seller")
    first = make_product(seller, title="First")
    second = make_product(seller, title="Second")
    deleted = make_product(seller, title="Deleted")
    sold = make_product(seller, title="Sold")
    deleted.is_active = False
    sold.is_sold = True
    db.commit()

    listed = ProductService.list_products(db)
    assert [p.id for p in listed] == [second.id, first.id]


def test_list_by_category(db, make_user, make_product):
    seller = make_user("seller")
    book = make_product(seller, title="Novel", category="Books")
    make_product(seller, title="Sofa", category="Furniture")
    assert [p.id for p in ProductService.list_by_category(db, "Books")] == [book.id]


def test_search_is_case_insensitive_substring(db, make_user, make_product):
    seller = make_user("seller")
    lamp = make_product(seller, title="Vintage Brass LAMP")
    make_product(seller, title="Oak table")
    assert [p.id for p in ProductService.search(db, "lamp")] == [lamp.id]


def test_search_with_category_filter(db, make_user, make_product):
    seller = make_user("seller")
    make_product(seller, title="Lamp shade", category="Home & Garden")
    desk_lamp = make_product(seller, title="Desk lamp", category="Electronics")
    results = ProductService.search(db, "LAMP", "Electronics")
    assert [p.id for p in results] == [desk_lamp.id]


def test_search_excludes_unlisted(db, make_user, make_product):
    seller = make_user("seller")
    lamp = make_product(seller, title="Lamp")
    lamp.is_active = False
    db.commit()
    assert ProductService.search(db, "lamp") == []


def test_blank_search_falls_back_to_listing(db, make_user, make_product):
    seller = make_user("seller")
    make_product(seller, title="A", category="Books")
    make_product(seller, title="B", category="Toys")
    assert len(ProductService.search(db, "  ")) == 2
    assert [p.title for p in ProductService.search(db, None, "Toys")] == ["B"]


def test_get_product_hides_deleted(db, make_user, make_product):
    product = make_product(make_user("seller"))
    assert ProductService.get_product(db, product.id).id == product.id
    ProductService.delete_product(db, product.id, product.seller_id)
    with pytest.raises(NotFoundError):
        ProductService.get_product(db, product.id)


def test_seller_products_include_deleted(db, make_user, make_product):
    seller = make_user("seller")
    kept = make_product(seller, title="Kept")
    gone = make_product(seller, title="Gone")
    ProductService.delete_product(db, gone.id, seller.id)
    ids = {p.id for p in ProductService.get_seller_products(db, seller.id)}
    assert ids == {kept.id, gone.id}


def test_update_product_by_owner(db, make_user, make_product):
    seller = make_user("seller")
    product = make_product(seller)
    updated = ProductService.update_product(
        db, product.id, request(title="Road bike (serviced)", price=Decimal("150.00")), seller.id
    )
    assert updated.title == "Road bike (serviced)"
    assert updated.price == Decimal("150.00")


def test_restocking_a_sold_out_listing_relists_it(db, make_user, make_product):
    seller = make_user("seller")
    product = make_product(seller, quantity=1)
    product.quantity = 0
    product.is_sold = True
    db.commit()
    assert ProductService.list_products(db) == []

    updated = ProductService.update_product(db, product.id, request(quantity=2), seller.id)

    assert updated.quantity == 2
    assert updated.is_sold is False
    assert [p.id for p in ProductService.list_products(db)] == [product.id]


def test_update_by_other_seller_is_rejected(db, make_user, make_product):
    owner = make_user("owner")
    other = make_user("other")
    product = make_product(owner, title="Mine")
    with pytest.raises(NotFoundError):
        ProductService.update_product(db, product.id, request(title="Stolen"), other.id)
    db.refresh(product)
    assert product.title == "Mine"


def test_delete_by_other_seller_is_rejected(db, make_user, make_product):
    owner = make_user("owner")
    other = make_user("other")
    product = make_product(owner)
    with pytest.raises(NotFoundError):
        ProductService.delete_product(db, product.id, other.id)
    db.refresh(product)
    assert product.is_active is True


def test_categories_and_conditions():
    assert ProductService.get_categories() == CATEGORIES
    assert "Other" in ProductService.get_categories()
    assert ProductService.get_condition_types() == CONDITION_TYPES
