import pytest
from bson import ObjectId

from subsmanager.entities import Product
from subsmanager.repositories import ProductRepository, SubscriptionRepository, UserRepository


class _Products(ProductRepository):
    def __init__(self):
        self.items = {}

    def create(self, product):
        product.id = product.id or ObjectId()
        self.items[product.id] = product

    def get_by_id(self, product_id):
        return self.items.get(product_id)

    def get_by_name(self, name):
        return next((p for p in self.items.values() if p.name == name), None)

    def get_by_category(self, category):
        return [p for p in self.items.values() if p.category == category]

    def get_all(self):
        return list(self.items.values())

    def get_active(self):
        return [p for p in self.items.values() if p.is_active()]

    def update(self, product):
        self.items[product.id] = product

    def delete(self, product_id):
        self.items.pop(product_id, None)

    def count(self):
        return len(self.items)


@pytest.mark.parametrize("interface", [ProductRepository, SubscriptionRepository, UserRepository])
def test_interfaces_cannot_be_instantiated(interface):
    with pytest.raises(TypeError):
        interface()


def test_complete_implementation_satisfies_interface():
    repo = _Products()
    repo.create(Product(name="Music", category="media", status="active"))
    assert isinstance(repo, ProductRepository)
    assert repo.count() == 1
    assert repo.get_by_name("Music").category == "media"


def test_active_products_follow_entity_status():
    repo = _Products()
    active = Product(name="Video", category="media", status="active")
    inactive = Product(name="Books", category="media", status="inactive")
    repo.create(active)
    repo.create(inactive)
    assert active.is_active() is True
    assert inactive.is_active() is False
    assert [p.name for p in repo.get_active()] == ["Video"]
    assert len(repo.get_by_category("media")) == 2