from decimal import Decimal

from app.quantum.core.security import get_password_hash
from app.quantum.db.models import Category, Order, OrderItem, Product, ProductReview, ShopReview, User

DEFAULT_PASSWORD = "Secret123!"


def create_user(db_session, **kwargs) -> User:
    user = User(
        first_name=kwargs.pop("first_name", "Jane"),
        last_name=kwargs.pop("last_name", "Doe"),
        email=kwargs.pop("email", "jane@example.com"),
        role=kwargs.pop("role", "admin"),
        hashed_password=get_password_hash(kwargs.pop("password", DEFAULT_PASSWORD)),
        **kwargs,
    )
    db_session.add(user)
    db_session.commit()
    return user


def login(client, email: str, password: str = DEFAULT_PASSWORD) -> str:
    response = client.post("/quantum/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["access_token"]


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def staff_headers(client, db_session, email: str = "staff@example.com") -> dict[str, str]:
    create_user(db_session, email=email, role="admin")
    return auth_headers(login(client, email))


def create_category(db_session, name: str = "Audio") -> Category:
    category = Category(name=name)
    db_session.add(category)
    db_session.commit()
    return category


def create_product(db_session, category: Category, name: str = "Headphones", price: str = "49.90") -> Product:
    product = Product(name=name, description="", price=Decimal(price), image_url="", category_id=category.id)
    db_session.add(product)
    db_session.commit()
    return product


def create_order(db_session, user: User, product: Product, quantity: int = 2, status: str = "en_attente") -> Order:
    order = Order(user_id=user.id, status=status, total=product.price * quantity)
    order.items.append(OrderItem(product_id=product.id, quantity=quantity, unit_price=product.price))
    db_session.add(order)
    db_session.commit()
    return order


def create_product_review(db_session, user: User, product: Product, rating: int = 4, comment: str = "Nice") -> ProductReview:
    review = ProductReview(user_id=user.id, product_id=product.id, rating=rating, comment=comment)
    db_session.add(review)
    db_session.commit()
    return review


def create_shop_review(db_session, user: User, rating: int = 5, comment: str = "Great shop") -> ShopReview:
    review = ShopReview(user_id=user.id, rating=rating, comment=comment)
    db_session.add(review)
    db_session.commit()
    return review
